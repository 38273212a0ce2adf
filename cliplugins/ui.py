"""Terminal output: coloured text and aligned tables."""

from __future__ import annotations

import re
import sys
import unicodedata
from typing import Any, TextIO

_ANSI = re.compile(r"\x1b\[[0-9;]*m")

RED = 31
GREEN = 32
YELLOW = 33
BOLD = 1

_COLUMN_GAP = "   "


def colorize(text: str, *args: int) -> str:
    """Wrap ``text`` in the ANSI styles given as SGR codes."""
    if not args:
        return text
    codes = ";".join(str(code) for code in args)
    return f"\x1b[{codes}m{text}\x1b[0m"


def decolorize(text: str) -> str:
    """Remove ANSI colour sequences from ``text``."""
    return _ANSI.sub("", text)


def command_color(text: str) -> str:
    """Highlight a command the user is told to run."""
    return colorize(text, YELLOW, BOLD)


def _display_width(text: str) -> int:
    return sum(
        2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
        for ch in decolorize(text)
    )


class Table:
    """Rows of text printed in columns separated by three spaces."""

    def __init__(self, stream: TextIO, headers: list[str]) -> None:
        self.stream = stream
        self.headers = [str(h) for h in headers]
        self.rows: list[list[str]] = []

    def add(self, *args: Any) -> None:
        self.rows.append([str(value) for value in args])

    def _lines(self) -> list[list[str]]:
        lines = [self.headers]
        for row in self.rows:
            cells = [cell.split("\n") for cell in row]
            height = max((len(c) for c in cells), default=1)
            for index in range(height):
                lines.append([c[index] if index < len(c) else "" for c in cells])
        return lines

    def print(self) -> None:
        lines = self._lines()
        columns = max(len(line) for line in lines)
        widths = [
            max((_display_width(line[col]) for line in lines if col < len(line)), default=0)
            for col in range(columns)
        ]
        for line in lines:
            padded = [
                cell + " " * (widths[col] - _display_width(cell))
                for col, cell in enumerate(line)
            ]
            self.stream.write(_COLUMN_GAP.join(padded).rstrip() + "\n")
        self.stream.flush()


class UI:
    """Writes messages to an output and an error stream."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def say(self, message: str) -> None:
        self.out.write(f"{message}\n")

    def warn(self, message: str) -> None:
        self.err.write(f"{message}\n")

    def failed(self, message: str) -> None:
        self.err.write(colorize("FAILED", RED, BOLD) + "\n")
        self.err.write(f"{message}\n")
        self.err.write("\n")

    def table(self, headers: list[str]) -> Table:
        return Table(self.out, headers)