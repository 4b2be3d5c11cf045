"""Forwarding the player's choices to the board."""

from __future__ import annotations

from typing import Any, Callable

from .chessboard import Chessboard
from .coordinate import Coordinate
from .signals import Connection, Signal


class Controller:
    """Passes chosen squares to the board and announces every move attempt."""

    def __init__(self, chessboard: Chessboard) -> None:
        self._chessboard = chessboard
        self._signal_move = Signal()

    def try_init_piece(self, origin: Coordinate) -> bool:
        return self._chessboard.try_init_piece(origin)

    def try_move_piece(self, to: Coordinate) -> bool:
        """Try the move; subscribers hear of the attempt whether or not it succeeded."""
        is_moved = self._chessboard.try_move_piece(to)
        self._signal_move.emit()
        return is_moved

    def connect_move(self, subscriber: Callable[[], Any]) -> Connection:
        return self._signal_move.connect(subscriber)