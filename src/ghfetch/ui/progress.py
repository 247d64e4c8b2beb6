"""Console progress display for downloads."""

import sys
from dataclasses import dataclass
from typing import TextIO

from ghfetch.core.protocols import ProgressType

BAR_WIDTH = 30


def format_bytes(size: float) -> str:
    """Human-readable byte size, e.g. ``1.5 MiB``."""
    for unit in ("B", "KiB", "MiB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GiB"


@dataclass
class _Task:
    name: str
    progress_type: ProgressType
    total: float | None
    completed: float = 0


class ConsoleProgressReporter:
    """Single-line progress bar; a byte counter when the total is unknown."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stderr
        self._tasks: dict[str, _Task] = {}
        self._counter = 0

    def is_active(self) -> bool:
        return self.stream.isatty()

    async def add_task(
        self,
        name: str,
        progress_type: ProgressType,
        total: float | None = None,
    ) -> str:
        self._counter += 1
        task_id = f"{progress_type.name.lower()}-{self._counter}"
        self._tasks[task_id] = _Task(name, progress_type, total)
        self._render(task_id)
        return task_id

    async def update_task(
        self,
        task_id: str,
        completed: float | None = None,
        description: str | None = None,  # noqa: ARG002
    ) -> None:
        task = self._tasks.get(task_id)
        if task is None:
            return
        if completed is not None:
            task.completed = completed
        self._render(task_id)

    async def finish_task(
        self,
        task_id: str,
        *,
        success: bool = True,
        description: str | None = None,
    ) -> None:
        task = self._tasks.pop(task_id, None)
        if task is None:
            return
        status = "✓" if success else "✗"
        suffix = f" ({description})" if description else ""
        self.stream.write(
            f"\r\033[K{status} {task.name} "
            f"{format_bytes(task.completed)}{suffix}\n"
        )
        self.stream.flush()

    def _render(self, task_id: str) -> None:
        task = self._tasks[task_id]
        if task.total:
            ratio = min(task.completed / task.total, 1.0)
            filled = int(BAR_WIDTH * ratio)
            bar = "#" * filled + "-" * (BAR_WIDTH - filled)
            line = (
                f"{task.name} [{bar}] {ratio:4.0%} "
                f"{format_bytes(task.completed)}/{format_bytes(task.total)}"
            )
        else:
            line = f"{task.name} {format_bytes(task.completed)}"
        self.stream.write(f"\r\033[K{line}")
        self.stream.flush()
