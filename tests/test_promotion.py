import pytest

from consolechess.coordinate import Coordinate
from consolechess.kinds import PieceColor, PieceType
from consolechess.pieces import Bishop, Knight, Pawn, Queen, Rook
from consolechess.promotion import PromotePieceInputer, promote_conditionally

PROMPT = "PROMOTE\nYou can Choose: B K Q R\nEnter: "
INVALID = "Piece is invalid\nPress any key to continue...\n"


def _inputer(*lines):
    return PromotePieceInputer(read_line=iter(lines).__next__)


def _never():
    raise AssertionError("input was not expected")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("b", PieceType.BISHOP),
        ("B", PieceType.BISHOP),
        ("k", PieceType.KNIGHT),
        ("K", PieceType.KNIGHT),
        ("q", PieceType.QUEEN),
        ("rook", PieceType.ROOK),
    ],
)
def test_choose(line, expected):
    assert _inputer(line).choose() is expected


def test_invalid_answer_is_asked_again():
    inputer = _inputer("x", "", "", "", "q")
    prompts = []
    inputer.connect_enter(prompts.append)
    assert inputer.choose() is PieceType.QUEEN
    assert prompts == [PROMPT, INVALID, PROMPT, INVALID, PROMPT]


@pytest.mark.parametrize(
    "line, cls", [("q", Queen), ("r", Rook), ("b", Bishop), ("k", Knight)]
)
def test_white_pawn_on_last_rank_is_replaced(line, cls):
    pawn = Pawn(PieceColor.WHITE, Coordinate("A", 8))
    pieces = [pawn]
    promote_conditionally(pawn, pieces, _inputer(line))
    assert len(pieces) == 1
    assert type(pieces[0]) is cls
    assert pieces[0].color is PieceColor.WHITE
    assert pieces[0].position == Coordinate("A", 8)


def test_black_pawn_on_first_rank_is_replaced():
    other = Queen(PieceColor.WHITE, Coordinate("D", 4))
    pawn = Pawn(PieceColor.BLACK, Coordinate("C", 1))
    pieces = [pawn, other]
    promote_conditionally(pawn, pieces, _inputer("q"))
    assert pieces[0] is other
    assert type(pieces[1]) is Queen
    assert pieces[1].color is PieceColor.BLACK
    assert pawn not in pieces


@pytest.mark.parametrize(
    "color, rank", [(PieceColor.WHITE, 7), (PieceColor.WHITE, 1), (PieceColor.BLACK, 8)]
)
def test_pawn_elsewhere_is_left(color, rank):
    pawn = Pawn(color, Coordinate("A", rank))
    pieces = [pawn]
    promote_conditionally(pawn, pieces, PromotePieceInputer(read_line=_never))
    assert pieces == [pawn]


def test_none_is_ignored():
    pieces = []
    promote_conditionally(None, pieces, PromotePieceInputer(read_line=_never))
    assert pieces == []


def test_promote_by_square():
    pawn = Pawn(PieceColor.WHITE, Coordinate("C", 8))
    pieces = [pawn]
    promote_conditionally(Coordinate("C", 8), pieces, _inputer("r"))
    assert [type(p) for p in pieces] == [Rook]


def test_square_without_pawn_is_ignored():
    queen = Queen(PieceColor.WHITE, Coordinate("C", 8))
    pieces = [queen]
    promote_conditionally(Coordinate("C", 8), pieces, PromotePieceInputer(read_line=_never))
    assert pieces == [queen]