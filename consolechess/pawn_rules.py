"""Move generation for pawns, en passant included."""

from __future__ import annotations

from typing import Sequence

from .coordinate import Coordinate, is_position_valid
from .finder import PieceFinder
from .kinds import ErrorKind, PieceColor, PieceType, error_message
from .pieces import Pawn, Piece
from .rules import MoveRules


def _validate(pawn: Pawn) -> None:
    if not is_position_valid(pawn.position):
        raise ValueError(error_message(ErrorKind.OUT_OF_CHESSBOARD))
    if pawn.color is PieceColor.NONE:
        raise ValueError(error_message(ErrorKind.NOT_CORRECT_PIECE))


def _direction(pawn: Pawn) -> int:
    return 1 if pawn.color is PieceColor.WHITE else -1


def _forward_moves(pawn: Pawn, finder: PieceFinder) -> list[Coordinate]:
    step = _direction(pawn)
    moves: list[Coordinate] = []
    one_step = pawn.position.offset(0, step)
    if is_position_valid(one_step) and finder.find(one_step) is None:
        moves.append(one_step)
        if pawn.is_not_moved:
            two_steps = pawn.position.offset(0, 2 * step)
            if is_position_valid(two_steps) and finder.find(two_steps) is None:
                moves.append(two_steps)
    return moves


def _diagonal_moves(pawn: Pawn, finder: PieceFinder) -> list[Coordinate]:
    step = _direction(pawn)
    moves: list[Coordinate] = []
    for side in (1, -1):
        diagonal = pawn.position.offset(side, step)
        if not is_position_valid(diagonal):
            continue
        target = finder.find(diagonal)
        beside = finder.find(pawn.position.offset(side, 0))
        if target is not None and target.color is not pawn.color:
            moves.append(diagonal)
        elif (
            beside is not None
            and type(beside) is Pawn
            and beside.can_en_passant
            and beside.color is not pawn.color
        ):
            moves.append(diagonal)
    return moves


class PawnRules(MoveRules):
    """Squares a pawn can reach: forward steps first, then diagonal captures."""

    def get_moves(self, piece: Piece | None, pieces_on_board: Sequence[Piece]) -> list[Coordinate]:
        if piece is None or type(piece) is not Pawn or piece.piece_type is not PieceType.PAWN:
            return []
        _validate(piece)
        finder = PieceFinder(pieces_on_board)
        forward = _forward_moves(piece, finder)
        diagonal = _diagonal_moves(piece, finder)
        return forward + diagonal