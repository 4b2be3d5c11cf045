"""Choosing and carrying out pawn promotion."""

from __future__ import annotations

from typing import Callable, MutableSequence

from .coordinate import CHESSBOARD_SIZE, Coordinate
from .finder import PieceFinder
from .kinds import PieceColor, PieceType, type_to_string
from .pieces import Bishop, Knight, Pawn, Piece, Queen, Rook
from .signals import Inputer

_PROMPT = "PROMOTE\nYou can Choose: B K Q R\nEnter: "
_INVALID = "Piece is invalid\nPress any key to continue...\n"

_CHOICES = (PieceType.BISHOP, PieceType.KNIGHT, PieceType.QUEEN, PieceType.ROOK)

_PROMOTED_CLASSES: dict[PieceType, type[Piece]] = {
    PieceType.BISHOP: Bishop,
    PieceType.KNIGHT: Knight,
    PieceType.QUEEN: Queen,
    PieceType.ROOK: Rook,
}


class PromotePieceInputer(Inputer):
    """Asks which piece a pawn becomes, repeating until the answer is valid.

    "K" and "k" both stand for the knight, since the king cannot be chosen.
    """

    def __init__(self, read_line: Callable[[], str] | None = None) -> None:
        super().__init__()
        self._read_line = read_line if read_line is not None else input

    def choose(self) -> PieceType:
        while True:
            self._prompt(_PROMPT)
            letter = self._read_line()[:1].upper()[:1]
            if letter == type_to_string(PieceType.KING)[0]:
                letter = letter.lower()
            for piece_type in _CHOICES:
                if letter == type_to_string(piece_type)[0]:
                    return piece_type
            self._prompt(_INVALID)
            self._read_line()


def _reached_last_rank(pawn: Pawn) -> bool:
    rank = pawn.position.rank
    return (rank == 1 and pawn.color is PieceColor.BLACK) or (
        rank == CHESSBOARD_SIZE and pawn.color is PieceColor.WHITE
    )


def _remove_identical(pieces: MutableSequence[Piece], target: Piece) -> None:
    for index, piece in enumerate(pieces):
        if piece is target:
            del pieces[index]
            return


def promote_conditionally(
    pawn: Pawn | Coordinate | None,
    pieces_on_board: MutableSequence[Piece],
    inputer: PromotePieceInputer | None = None,
) -> None:
    """Replace a pawn on its last rank by the piece the inputer picks.

    The pawn may be given directly or by the square it stands on; anything
    other than a pawn on its last rank is left alone.
    """
    if isinstance(pawn, Coordinate):
        found = PieceFinder(pieces_on_board).find(pawn)
        pawn = found if isinstance(found, Pawn) else None
    if pawn is None or not _reached_last_rank(pawn):
        return
    chooser = inputer if inputer is not None else PromotePieceInputer()
    piece_class = _PROMOTED_CLASSES.get(chooser.choose())
    if piece_class is None:
        return
    pieces_on_board.append(piece_class(pawn.color, pawn.position))
    _remove_identical(pieces_on_board, pawn)