"""Interactive prompts."""

from collections.abc import Callable

from ghfetch.domain.types import Asset
from ghfetch.exceptions import SelectionCancelledError

QUIT_ANSWERS = frozenset({"q", "quit", "exit"})


def ask_select_asset(
    assets: list[Asset],
    prompt: str = "Pick the asset to download",
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print,
) -> Asset:
    """Show a numbered asset list and return the one the user picks.

    Raises:
        SelectionCancelledError: If the user quits or input ends

    """
    if not assets:
        msg = "the release has no assets"
        raise SelectionCancelledError(msg)

    for index, asset in enumerate(assets, start=1):
        output_func(f"  {index:>3}) {asset.name}")

    while True:
        try:
            answer = input_func(f"{prompt} [1-{len(assets)}, q to quit]: ")
        except EOFError as e:
            msg = "No asset selected"
            raise SelectionCancelledError(msg) from e

        answer = answer.strip().lower()
        if answer in QUIT_ANSWERS:
            msg = "No asset selected"
            raise SelectionCancelledError(msg)
        if answer.isdigit() and 1 <= int(answer) <= len(assets):
            return assets[int(answer) - 1]
        output_func(f"Invalid choice '{answer}'")
