"""Board squares and the board's bounds."""

from __future__ import annotations

from dataclasses import dataclass

CHESSBOARD_SIZE = 8
FIRST_FILE = "A"
LAST_FILE = chr(ord(FIRST_FILE) + CHESSBOARD_SIZE - 1)
FILES = "".join(chr(ord(FIRST_FILE) + i) for i in range(CHESSBOARD_SIZE))


@dataclass(frozen=True, order=True)
class Coordinate:
    """A square named by its file letter and rank number.

    Squares order by file first, then by rank.
    """

    file: str = FIRST_FILE
    rank: int = 1

    def offset(self, file_delta: int, rank_delta: int) -> Coordinate:
        """Return the square shifted by the given number of files and ranks."""
        return Coordinate(chr(ord(self.file) + file_delta), self.rank + rank_delta)

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


def is_position_valid(position: Coordinate) -> bool:
    """Tell whether a square lies on the board."""
    return (
        len(position.file) == 1
        and FIRST_FILE <= position.file <= LAST_FILE
        and 1 <= position.rank <= CHESSBOARD_SIZE
    )