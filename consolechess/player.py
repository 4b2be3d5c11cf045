"""The side whose turn it is."""

from __future__ import annotations

from .kinds import PieceColor
from .signals import PieceSignalDirector


class Player:
    """Tracks the colour to move; flips it after every announced move."""

    def __init__(
        self, first_move_color: PieceColor, signal_director: PieceSignalDirector
    ) -> None:
        self._color = (
            PieceColor.WHITE if first_move_color is PieceColor.NONE else first_move_color
        )
        signal_director.connect_move(self._change_color)

    @property
    def color(self) -> PieceColor:
        return self._color

    def _change_color(self) -> None:
        self._color = PieceColor.WHITE if self._color is PieceColor.BLACK else PieceColor.BLACK