"""The game board: choosing a piece, moving it and announcing changes."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .coordinate import Coordinate
from .director import PieceDirector
from .kinds import PieceColor
from .pieces import Piece
from .player import Player
from .promotion import PromotePieceInputer
from .signals import Connection, PieceSignalDirector, Signal
from .validator import MoveValidator

NO_SQUARE = Coordinate("\x00", 0)


class Chessboard:
    """Ties the pieces, their mover and the move validator together.

    White moves first.  ``origin`` and ``target`` hold the squares last
    chosen for the piece and for its destination.
    """

    def __init__(
        self,
        pieces_on_board: Iterable[Piece],
        signal_director: PieceSignalDirector,
        promotion_inputer: PromotePieceInputer | None = None,
    ) -> None:
        self.pieces_on_board: list[Piece] = list(pieces_on_board)
        self.piece_director = PieceDirector(
            self.pieces_on_board, signal_director, promotion_inputer
        )
        self.player = Player(PieceColor.WHITE, signal_director)
        self.move_validator = MoveValidator(self.pieces_on_board, self.player)
        self.origin = NO_SQUARE
        self.target = NO_SQUARE
        self._updated = Signal()

    def try_init_piece(self, origin: Coordinate) -> bool:
        """Choose the piece on a square; True if it has somewhere to go."""
        self.origin = origin
        self.target = NO_SQUARE
        self.piece_director.init_current_piece(origin)

        piece = self.piece_director.current_piece
        if piece is None:
            return False

        self.move_validator.calculate_possible_moves(piece)
        if not self.move_validator.possible_moves:
            return False

        self._updated.emit()
        return True

    def try_move_piece(self, to: Coordinate) -> bool:
        """Move the chosen piece to a square; True if the move was legal."""
        self.target = to

        if not self.move_validator.is_valid_move(self.piece_director.current_piece, to):
            return False

        self.move_validator.clear_possible_moves()
        self.move_validator.clear_pieces_can_move()
        self.piece_director.move_piece(to, self._updated.emit)
        self.move_validator.calculate_pieces_can_move()

        self._updated.emit()
        return True

    def connect_chessboard_updated(self, subscriber: Callable[[], Any]) -> Connection:
        """Subscribe to every change of what the board shows."""
        return self._updated.connect(subscriber)