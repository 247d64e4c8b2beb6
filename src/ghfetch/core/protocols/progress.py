"""Progress reporting protocol for core services.

Services report progress through this protocol so they never import a
concrete UI implementation::

    class DownloadService:
        def __init__(self, progress_reporter: ProgressReporter | None = None):
            self.progress_reporter = (
                progress_reporter or NullProgressReporter()
            )
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol, runtime_checkable


class ProgressType(Enum):
    """Types of progress operations.

    Attributes:
        DOWNLOAD: File download with byte-level progress

    """

    DOWNLOAD = auto()


@runtime_checkable
class ProgressReporter(Protocol):
    """Abstract interface for reporting progress from services."""

    def is_active(self) -> bool:
        """Check if progress reporting is currently active."""
        ...

    async def add_task(
        self,
        name: str,
        progress_type: ProgressType,
        total: float | None = None,
    ) -> str:
        """Add a new progress task.

        Args:
            name: Human-readable task name for display.
            progress_type: Category of progress operation.
            total: Total units of work. None means indeterminate progress.

        Returns:
            Task identifier for update_task() and finish_task().

        """
        ...

    async def update_task(
        self,
        task_id: str,
        completed: float | None = None,
        description: str | None = None,
    ) -> None:
        """Update progress for an existing task."""
        ...

    async def finish_task(
        self,
        task_id: str,
        *,
        success: bool = True,
        description: str | None = None,
    ) -> None:
        """Mark a task as finished."""
        ...


class NullProgressReporter:
    """Progress reporter that ignores every call."""

    def is_active(self) -> bool:
        return False

    async def add_task(
        self,
        name: str,  # noqa: ARG002
        progress_type: ProgressType,  # noqa: ARG002
        total: float | None = None,  # noqa: ARG002
    ) -> str:
        return "null-task"

    async def update_task(
        self,
        task_id: str,
        completed: float | None = None,
        description: str | None = None,
    ) -> None:
        return None

    async def finish_task(
        self,
        task_id: str,
        *,
        success: bool = True,
        description: str | None = None,
    ) -> None:
        return None
