"""The standard starting position."""

from __future__ import annotations

from .coordinate import FILES
from .kinds import COUNT_OF_BISHOP_KNIGHT_ROOK_PER_COLOR, PieceColor
from .pieces import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from .signals import PieceSignalDirector


def init_normal_board(signal_director: PieceSignalDirector) -> list[Piece]:
    """Return all pieces of a new game, with kings, rooks and pawns wired for play."""
    black_king = King(PieceColor.BLACK, signal_director=signal_director)
    white_king = King(PieceColor.WHITE, signal_director=signal_director)

    pieces: list[Piece] = []
    for order_number in range(1, COUNT_OF_BISHOP_KNIGHT_ROOK_PER_COLOR + 1):
        pieces.extend(
            [
                Bishop.starting(PieceColor.BLACK, order_number),
                Bishop.starting(PieceColor.WHITE, order_number),
                Knight.starting(PieceColor.BLACK, order_number),
                Knight.starting(PieceColor.WHITE, order_number),
                Rook.starting(PieceColor.BLACK, order_number, black_king),
                Rook.starting(PieceColor.WHITE, order_number, white_king),
            ]
        )

    pieces.extend([black_king, white_king])

    for file in FILES:
        pieces.append(Pawn.starting(PieceColor.BLACK, file, signal_director))
        pieces.append(Pawn.starting(PieceColor.WHITE, file, signal_director))

    pieces.extend([Queen.starting(PieceColor.BLACK), Queen.starting(PieceColor.WHITE)])
    return pieces