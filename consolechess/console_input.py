"""Reading squares from the keyboard and echoing prompts."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO

from .coordinate import Coordinate
from .signals import Inputer

_INTEGER = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_rank(text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        return 0
    value = int(match.group(1))
    return value if _INT_MIN <= value <= _INT_MAX else 0


class HandlerInputer(Inputer):
    """Asks for a file letter and a rank number to name a square.

    An unreadable rank becomes 0 and an empty file becomes the NUL character,
    so such squares are simply off the board.
    """

    def __init__(self, read_line: Callable[[], str] | None = None) -> None:
        super().__init__()
        self._read_line = read_line if read_line is not None else input

    def _enter_file(self) -> str:
        self._prompt("File: ")
        return self._read_line()[:1].upper()[:1] or "\x00"

    def _enter_rank(self) -> int:
        self._prompt("Rank: ")
        return _parse_rank(self._read_line())

    def _enter_coordinate(self) -> Coordinate:
        file = self._enter_file()
        rank = self._enter_rank()
        return Coordinate(file, rank)

    def enter_from(self) -> Coordinate:
        self._prompt("FROM\n")
        return self._enter_coordinate()

    def enter_to(self) -> Coordinate:
        self._prompt("TO\n")
        return self._enter_coordinate()


class LabelShower:
    """Writes every prompt of an inputer to a text stream."""

    def __init__(self, inputer: Inputer, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        inputer.connect_enter(self.show)

    def show(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()