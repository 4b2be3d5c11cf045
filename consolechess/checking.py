"""Rule lookup, check detection and filtering of moves that leave the king in check."""

from __future__ import annotations

from typing import Sequence

from .coordinate import Coordinate
from .finder import PieceFinder
from .king_rules import KingRules
from .kinds import ErrorKind, PieceColor, error_message
from .pawn_rules import PawnRules
from .pieces import Bishop, King, Knight, Pawn, Piece, Queen, Rook
from .rules import BishopRules, KnightRules, MoveRules, QueenRules, RookRules

_RULES_BY_PIECE: dict[type, type[MoveRules]] = {
    Bishop: BishopRules,
    King: KingRules,
    Knight: KnightRules,
    Pawn: PawnRules,
    Queen: QueenRules,
    Rook: RookRules,
}


def create_rules(piece: Piece) -> MoveRules:
    """Return the move rules for the piece's exact class."""
    rules = _RULES_BY_PIECE.get(type(piece))
    if rules is None:
        raise ValueError(error_message(ErrorKind.NOT_CORRECT_PIECE))
    return rules()


def is_king_in_check(king: King, pieces_on_board: Sequence[Piece]) -> bool:
    """Tell whether any opposing piece can reach the king's square."""
    for piece in pieces_on_board:
        if piece.color is king.color:
            continue
        if king.position in create_rules(piece).get_moves(piece, pieces_on_board):
            return True
    return False


def is_check(king_color: PieceColor, pieces_on_board: Sequence[Piece]) -> bool:
    """Tell whether the first king of the colour is in check; False if there is none."""
    for piece in pieces_on_board:
        if isinstance(piece, King) and piece.color is king_color:
            return is_king_in_check(piece, pieces_on_board)
    return False


class MoveChecker:
    """Produces a piece's moves that do not leave its own king in check."""

    def __init__(self, piece: Piece) -> None:
        self._rules = create_rules(piece)
        self._piece = piece

    def _is_safe(self, move: Coordinate, pieces_on_board: Sequence[Piece]) -> bool:
        captured = PieceFinder(pieces_on_board).find(move)
        remaining = [piece for piece in pieces_on_board if piece is not captured]
        self._piece.move(move, False)
        return not is_check(self._piece.color, remaining)

    def filtered_moves(self, pieces_on_board: Sequence[Piece]) -> list[Coordinate]:
        """Return the legal target squares; the piece ends on its original square."""
        candidates = self._rules.get_moves(self._piece, pieces_on_board)
        origin = self._piece.position
        try:
            return [move for move in candidates if self._is_safe(move, pieces_on_board)]
        finally:
            self._piece.move(origin, False)