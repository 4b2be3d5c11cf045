"""Enumerations, limits and their text forms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

COUNT_OF_BISHOP_KNIGHT_ROOK_PER_COLOR = 2
MAX_COUNT_ELEMENTS = 32
MAX_MOVES_WITHOUT_PAWN_MOVE_OR_CAPTURE = 75


class PieceColor(Enum):
    NONE = 0
    BLACK = 1
    WHITE = 2


class PieceType(Enum):
    NONE = 0
    BISHOP = 1
    KING = 2
    KNIGHT = 3
    PAWN = 4
    QUEEN = 5
    ROOK = 6


class CastleSide(Enum):
    LEFT = 0
    RIGHT = 1


class ErrorKind(Enum):
    OUT_OF_CHESSBOARD = 1
    OUT_OF_COUNT_OF_BISHOP_KNIGHT_ROOK_WITH_ONE_COLOR = 2
    NOT_CORRECT_PIECE = 3
    NOT_CORRECT_MOVE = 4


class ConsoleColor(IntEnum):
    """Console colour codes: low nibble is text, high nibble is background."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CERULEAN = 3
    DARK_RED = 4
    BROWN = 6
    GRAY = 8
    RED = 12
    YELLOW = 14
    WHITE = 15


_ERROR_MESSAGES = {
    ErrorKind.OUT_OF_CHESSBOARD: "ChessPiece is out of the Chessboard",
    ErrorKind.OUT_OF_COUNT_OF_BISHOP_KNIGHT_ROOK_WITH_ONE_COLOR: "Wrong order number was entered",
    ErrorKind.NOT_CORRECT_PIECE: "Piece is not correct",
    ErrorKind.NOT_CORRECT_MOVE: "Move is impossible",
}

_COLOR_STRINGS = {
    PieceColor.NONE: " ",
    PieceColor.BLACK: "b",
    PieceColor.WHITE: "w",
}

_TYPE_STRINGS = {
    PieceType.NONE: " ",
    PieceType.BISHOP: "B",
    PieceType.KING: "K",
    PieceType.KNIGHT: "k",
    PieceType.PAWN: "P",
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
}


def error_message(error: ErrorKind) -> str:
    """Return the human-readable message for an error kind."""
    return _ERROR_MESSAGES.get(error, "Unknown error")


def color_to_string(color: PieceColor) -> str:
    """Return the one-letter form of a piece colour."""
    return _COLOR_STRINGS.get(color, "Unknown color")


def type_to_string(piece_type: PieceType) -> str:
    """Return the letter that shows a piece type on the board."""
    return _TYPE_STRINGS.get(piece_type, "Unknown piece")


@dataclass(frozen=True)
class PieceColorAndType:
    """A piece's colour together with its type; empty squares use NONE for both."""

    color: PieceColor = PieceColor.NONE
    piece_type: PieceType = PieceType.NONE