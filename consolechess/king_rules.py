"""Move generation for the king, castling included."""

from __future__ import annotations

from typing import Sequence

from .coordinate import FIRST_FILE, LAST_FILE, Coordinate, is_position_valid
from .finder import PieceFinder
from .kinds import ErrorKind, PieceType, error_message
from .pieces import Castable, King, Piece
from .rules import MoveRules

_NEIGHBOURS = tuple(
    (file_delta, rank_delta)
    for file_delta in (-1, 0, 1)
    for rank_delta in (-1, 0, 1)
    if (file_delta, rank_delta) != (0, 0)
)


def _castling_rook(finder: PieceFinder, king: King, file: str) -> bool:
    rook = finder.find(Coordinate(file, king.position.rank))
    return (
        rook is not None
        and isinstance(rook, Castable)
        and rook.can_make_castling
        and rook.color is king.color
    )


def _path_clear(finder: PieceFinder, rank: int, files: Sequence[str]) -> bool:
    return all(finder.find(Coordinate(file, rank)) is None for file in files)


def _files_between(start: str, stop: str) -> list[str]:
    return [chr(code) for code in range(ord(start), ord(stop))]


def _castling_moves(king: King, finder: PieceFinder) -> list[Coordinate]:
    if king.is_check or not king.can_make_castling:
        return []
    moves: list[Coordinate] = []
    rank = king.position.rank
    king_file = king.position.file
    if _castling_rook(finder, king, FIRST_FILE):
        left_files = _files_between(chr(ord(FIRST_FILE) + 1), king_file)
        if _path_clear(finder, rank, left_files):
            moves.append(king.position.offset(-2, 0))
    if _castling_rook(finder, king, LAST_FILE):
        right_files = _files_between(chr(ord(king_file) + 1), LAST_FILE)
        if _path_clear(finder, rank, right_files):
            moves.append(king.position.offset(2, 0))
    return moves


class KingRules(MoveRules):
    """Squares a king can reach: its neighbours plus available castling targets."""

    def get_moves(self, piece: Piece | None, pieces_on_board: Sequence[Piece]) -> list[Coordinate]:
        if piece is None or type(piece) is not King or piece.piece_type is not PieceType.KING:
            return []
        if not is_position_valid(piece.position):
            raise ValueError(error_message(ErrorKind.OUT_OF_CHESSBOARD))
        finder = PieceFinder(pieces_on_board)
        moves: list[Coordinate] = []
        for file_delta, rank_delta in _NEIGHBOURS:
            square = piece.position.offset(file_delta, rank_delta)
            if not is_position_valid(square):
                continue
            found = finder.find(square)
            if found is None or found.color is not piece.color:
                moves.append(square)
        moves.extend(_castling_moves(piece, finder))
        return moves