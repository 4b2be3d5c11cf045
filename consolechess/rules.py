"""Pseudo-legal move generation for bishops, queens, rooks and knights."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .coordinate import Coordinate, is_position_valid
from .finder import PieceFinder
from .kinds import ErrorKind, PieceType, error_message
from .pieces import Bishop, Knight, Piece, Queen, Rook

_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_STRAIGHTS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_KNIGHT_JUMPS = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)


class MoveRules(ABC):
    """Produces the squares a piece can reach, ignoring checks."""

    @abstractmethod
    def get_moves(self, piece: Piece | None, pieces_on_board: Sequence[Piece]) -> list[Coordinate]:
        """Return the target squares of the piece, or an empty list if it does not fit."""


def slide(finder: PieceFinder, current: Piece, increment: tuple[int, int]) -> list[Coordinate]:
    """Walk from the piece's square in one direction until the edge or a piece.

    An opposing piece's square is included; a friendly piece's square is not.
    """
    file_delta, rank_delta = increment
    moves: list[Coordinate] = []
    square = current.position
    while True:
        square = square.offset(file_delta, rank_delta)
        if not is_position_valid(square):
            break
        found = finder.find(square)
        if found is not None:
            if found.color is not current.color:
                moves.append(square)
            break
        moves.append(square)
    return moves


def _fits(piece: Piece | None, cls: type[Piece], piece_type: PieceType) -> bool:
    return piece is not None and type(piece) is cls and piece.piece_type is piece_type


def _slide_all(
    piece: Piece, pieces_on_board: Sequence[Piece], directions: Sequence[tuple[int, int]]
) -> list[Coordinate]:
    finder = PieceFinder(pieces_on_board)
    return [square for direction in directions for square in slide(finder, piece, direction)]


class BishopRules(MoveRules):
    def get_moves(self, piece: Piece | None, pieces_on_board: Sequence[Piece]) -> list[Coordinate]:
        if not _fits(piece, Bishop, PieceType.BISHOP):
            return []
        return _slide_all(piece, pieces_on_board, _DIAGONALS)


class QueenRules(MoveRules):
    def get_moves(self, piece: Piece | None, pieces_on_board: Sequence[Piece]) -> list[Coordinate]:
        if not _fits(piece, Queen, PieceType.QUEEN):
            return []
        return _slide_all(piece, pieces_on_board, _DIAGONALS + _STRAIGHTS)


class RookRules(MoveRules):
    def get_moves(self, piece: Piece | None, pieces_on_board: Sequence[Piece]) -> list[Coordinate]:
        if not _fits(piece, Rook, PieceType.ROOK):
            return []
        return _slide_all(piece, pieces_on_board, _STRAIGHTS)


class KnightRules(MoveRules):
    def get_moves(self, piece: Piece | None, pieces_on_board: Sequence[Piece]) -> list[Coordinate]:
        if not _fits(piece, Knight, PieceType.KNIGHT):
            return []
        if not is_position_valid(piece.position):
            raise ValueError(error_message(ErrorKind.OUT_OF_CHESSBOARD))
        finder = PieceFinder(pieces_on_board)
        moves: list[Coordinate] = []
        for file_delta, rank_delta in _KNIGHT_JUMPS:
            square = piece.position.offset(file_delta, rank_delta)
            if not is_position_valid(square):
                continue
            found = finder.find(square)
            if found is None or found.color is not piece.color:
                moves.append(square)
        return moves