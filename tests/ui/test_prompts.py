"""Tests for the interactive asset prompt."""

import pytest

from ghfetch.domain.types import Asset
from ghfetch.exceptions import SelectionCancelledError
from ghfetch.ui.prompts import ask_select_asset

ASSETS = [
    Asset("tool-linux.tar.gz", "https://example.com/1"),
    Asset("tool-macos.tar.gz", "https://example.com/2"),
]


def answers(*values: str):
    iterator = iter(values)

    def input_func(_prompt: str) -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError from None

    return input_func


def test_lists_assets_and_returns_choice():
    lines: list[str] = []

    chosen = ask_select_asset(
        ASSETS, input_func=answers("2"), output_func=lines.append
    )

    assert chosen == ASSETS[1]
    assert lines == ["    1) tool-linux.tar.gz", "    2) tool-macos.tar.gz"]


def test_invalid_choice_asks_again():
    lines: list[str] = []

    chosen = ask_select_asset(
        ASSETS, input_func=answers("7", "abc", " 1 "), output_func=lines.append
    )

    assert chosen == ASSETS[0]
    assert "Invalid choice '7'" in lines
    assert "Invalid choice 'abc'" in lines


@pytest.mark.parametrize("answer", ["q", "QUIT", "exit"])
def test_quit(answer: str):
    with pytest.raises(SelectionCancelledError, match="No asset selected"):
        ask_select_asset(ASSETS, input_func=answers(answer), output_func=print)


def test_end_of_input_cancels():
    with pytest.raises(SelectionCancelledError):
        ask_select_asset(ASSETS, input_func=answers(), output_func=print)


def test_release_without_assets():
    with pytest.raises(SelectionCancelledError, match="no assets"):
        ask_select_asset([], input_func=answers("1"), output_func=print)
