"""Lookup of pieces by the square they stand on."""

from __future__ import annotations

from typing import Iterable

from .coordinate import Coordinate
from .pieces import Piece


class PieceFinder:
    """Index of pieces by square, built once from a collection of pieces.

    When two pieces share a square, the one that comes later wins.
    """

    def __init__(self, pieces: Iterable[Piece]) -> None:
        self._pieces: dict[Coordinate, Piece] = {piece.position: piece for piece in pieces}

    def find(self, coordinate: Coordinate) -> Piece | None:
        """Return the piece on the square, or None if the square is empty."""
        return self._pieces.get(coordinate)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._pieces

    def __len__(self) -> int:
        return len(self._pieces)