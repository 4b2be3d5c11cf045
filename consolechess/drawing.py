"""Detection of drawn positions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .coordinate import CHESSBOARD_SIZE, FILES, Coordinate
from .finder import PieceFinder
from .kinds import MAX_MOVES_WITHOUT_PAWN_MOVE_OR_CAPTURE, PieceColor, PieceType
from .pieces import Pawn

if TYPE_CHECKING:
    from .chessboard import Chessboard


def is_insufficient_material(chessboard: Chessboard) -> bool:
    """Tell whether neither side has enough pieces left to give mate."""
    director = chessboard.piece_director
    bishops = {
        (PieceColor.BLACK, True): 0,
        (PieceColor.BLACK, False): 0,
        (PieceColor.WHITE, True): 0,
        (PieceColor.WHITE, False): 0,
    }
    knights = 0
    kings: set[PieceColor] = set()

    for rank in range(CHESSBOARD_SIZE, 0, -1):
        for file in FILES:
            piece = director.get_piece(Coordinate(file, rank))
            if piece is None:
                continue
            color = PieceColor.BLACK if piece.color is PieceColor.BLACK else PieceColor.WHITE
            piece_type = piece.piece_type
            if piece_type is PieceType.BISHOP:
                is_light = (ord(file) + rank) % 2 == 0
                bishops[color, is_light] += 1
            elif piece_type is PieceType.KNIGHT:
                knights += 1
            elif piece_type is PieceType.KING:
                kings.add(color)
            else:
                return False

    minor_pieces = knights + sum(bishops.values())
    white_bishops_weak = (
        bishops[PieceColor.WHITE, True] == 0 or bishops[PieceColor.WHITE, False] == 0
    )
    black_bishops_weak = (
        bishops[PieceColor.BLACK, True] == 0 or bishops[PieceColor.BLACK, False] == 0
    )
    both_kings = PieceColor.WHITE in kings and PieceColor.BLACK in kings
    return both_kings and (
        minor_pieces <= 1
        or (minor_pieces <= 2 and white_bishops_weak and black_bishops_weak)
    )


class DrawChecker:
    """Tells after each move whether the game is drawn.

    It counts moves made without a pawn move or a capture, so it must be
    asked once after every move.
    """

    def __init__(self) -> None:
        self._moves_without_pawn_or_capture = 0
        self._last_eaten_count = 0

    @property
    def moves_without_pawn_or_capture(self) -> int:
        return self._moves_without_pawn_or_capture

    def _count_move(self, chessboard: Chessboard) -> None:
        director = chessboard.piece_director
        piece = PieceFinder(director.pieces_on_board).find(chessboard.target)
        if piece is None:
            return
        eaten_count = len(director.eaten_pieces)
        if type(piece) is Pawn or eaten_count != self._last_eaten_count:
            self._moves_without_pawn_or_capture = 0
            self._last_eaten_count = eaten_count
        else:
            self._moves_without_pawn_or_capture += 1

    def is_draw(self, chessboard: Chessboard) -> bool:
        """Tell whether the position is stalemate, too long without progress or dead."""
        self._count_move(chessboard)
        return (
            chessboard.move_validator.pieces_can_move_count == 0
            or self._moves_without_pawn_or_capture >= MAX_MOVES_WITHOUT_PAWN_MOVE_OR_CAPTURE
            or is_insufficient_material(chessboard)
        )