"""Carrying out moves on the list of pieces: captures, en passant, promotion, check."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Sequence

from .checking import is_check
from .coordinate import CHESSBOARD_SIZE, Coordinate
from .finder import PieceFinder
from .kinds import ErrorKind, PieceColor, PieceColorAndType, error_message
from .pieces import Pawn, Piece
from .promotion import PromotePieceInputer, promote_conditionally
from .signals import PieceSignalDirector


def find_take_square(
    piece: Piece, pieces_on_board: Sequence[Piece], to: Coordinate
) -> Coordinate:
    """Return the square whose piece is taken when the piece moves to the target.

    That is the target itself, except for an en passant capture, where it is
    the square of the passed pawn beside the moving pawn.
    """
    passed_square = Coordinate(to.file, piece.position.rank)
    opponent = PieceFinder(pieces_on_board).find(passed_square)
    if (
        isinstance(piece, Pawn)
        and isinstance(opponent, Pawn)
        and opponent.can_en_passant
        and opponent.color is not piece.color
    ):
        return passed_square
    return to


def _opponent(color: PieceColor) -> PieceColor:
    if color is PieceColor.BLACK:
        return PieceColor.WHITE
    if color is PieceColor.WHITE:
        return PieceColor.BLACK
    return PieceColor.NONE


class PieceDirector:
    """Holds the pieces in play and the taken ones, and moves the chosen piece."""

    def __init__(
        self,
        pieces_on_board: MutableSequence[Piece],
        signal_director: PieceSignalDirector,
        promotion_inputer: PromotePieceInputer | None = None,
    ) -> None:
        self.pieces_on_board = pieces_on_board
        self.eaten_pieces: list[Piece] = []
        self.current_piece: Piece | None = None
        self.is_check = False
        self._signal_director = signal_director
        self._promotion_inputer = promotion_inputer

    def get_piece(self, coordinate: Coordinate) -> Piece | None:
        """Return the first piece standing on the square, or None."""
        return next(
            (piece for piece in self.pieces_on_board if piece.position == coordinate), None
        )

    def get_color_and_type(self, coordinate: Coordinate) -> PieceColorAndType:
        piece = self.get_piece(coordinate)
        return piece.color_and_type if piece is not None else PieceColorAndType()

    def init_current_piece(self, coordinate: Coordinate) -> None:
        self.current_piece = self.get_piece(coordinate)

    def _take(self, square: Coordinate) -> None:
        for index, piece in enumerate(self.pieces_on_board):
            if piece.position == square:
                self.eaten_pieces.append(self.pieces_on_board.pop(index))
                return

    def move_piece(
        self, to: Coordinate, board_updated: Callable[[], Any] | None = None
    ) -> None:
        """Move the current piece, taking and promoting as the move demands.

        ``board_updated`` is called just before the promotion choice is asked for.
        """
        piece = self.current_piece
        if piece is None:
            raise ValueError(error_message(ErrorKind.NOT_CORRECT_PIECE))

        self._take(find_take_square(piece, self.pieces_on_board, to))
        piece.move(to)
        self._signal_director.invite()

        if type(piece) is Pawn and (
            (piece.position.rank == 1 and piece.color is PieceColor.BLACK)
            or (piece.position.rank == CHESSBOARD_SIZE and piece.color is PieceColor.WHITE)
        ):
            if board_updated is not None:
                board_updated()
            promote_conditionally(piece, self.pieces_on_board, self._promotion_inputer)

        self.is_check = is_check(_opponent(piece.color), self.pieces_on_board)
        self._signal_director.invite_check(self.is_check)