"""Matching lines of output against groups of expected substrings."""

from __future__ import annotations

from typing import Any

from .ui import decolorize


class SliceMatcher:
    """Matches when, for each group, one line contains all its substrings."""

    def __init__(self, *args: list[str]) -> None:
        self.expected = [list(group) for group in args]
        self.failed_at_index = 0

    def match(self, actual: Any) -> bool:
        if not isinstance(actual, str):
            raise TypeError(
                f"ContainSubstrings matcher expects a string, but it's actually a "
                f"{type(actual).__name__}"
            )
        lines = [decolorize(line) for line in actual.split("\n")]
        for index, group in enumerate(self.expected):
            if not any(all(s in line for s in group) for line in lines):
                self.failed_at_index = index
                return False
        return True

    def _expected_text(self) -> str:
        return "[" + " ".join(self.expected[self.failed_at_index]) + "]"

    def failure_message(self, actual: Any) -> str:
        return f'expected to find "{self._expected_text()}" in actual:\n"{actual}"\n'

    def negated_failure_message(self, actual: Any) -> str:
        return f'expected to not find "{self._expected_text()}" in actual:\n"{actual}"\n'


def contain_substrings(actual: Any, *args: list[str]) -> bool:
    """Whether ``actual`` matches every group of substrings."""
    return SliceMatcher(*args).match(actual)