import pytest

from consolechess.coordinate import Coordinate, is_position_valid
from consolechess.finder import PieceFinder
from consolechess.kinds import PieceColor
from consolechess.pieces import Bishop, King, Knight, Piece, Queen, Rook
from consolechess.rules import (
    BishopRules,
    KnightRules,
    MoveRules,
    QueenRules,
    RookRules,
    slide,
)

W = PieceColor.WHITE
B = PieceColor.BLACK


def _all_valid_unique(moves, origin):
    return (
        all(is_position_valid(m) for m in moves)
        and len(set(moves)) == len(moves)
        and origin not in moves
    )


def test_move_rules_is_abstract():
    with pytest.raises(TypeError):
        MoveRules()


def test_slide_stops_on_enemy_including_it():
    rook = Rook(W, Coordinate("D", 4))
    enemy = Knight(B, Coordinate("D", 6))
    finder = PieceFinder([rook, enemy])
    assert slide(finder, rook, (0, 1)) == [Coordinate("D", 5), Coordinate("D", 6)]


def test_slide_stops_before_friend():
    rook = Rook(W, Coordinate("D", 4))
    friend = Knight(W, Coordinate("D", 5))
    finder = PieceFinder([rook, friend])
    assert slide(finder, rook, (0, 1)) == []


def test_slide_at_edge_is_empty():
    rook = Rook(W, Coordinate("A", 1))
    assert slide(PieceFinder([rook]), rook, (-1, 0)) == []


def test_rook_empty_board_moves_share_line():
    rook = Rook(W, Coordinate("D", 4))
    moves = RookRules().get_moves(rook, [rook])
    assert _all_valid_unique(moves, rook.position)
    assert all(m.file == "D" or m.rank == 4 for m in moves)


def test_rook_blocked_corner():
    rook = Rook(W, Coordinate("A", 1))
    friend = Knight(W, Coordinate("A", 2))
    enemy = Bishop(B, Coordinate("B", 1))
    assert RookRules().get_moves(rook, [rook, friend, enemy]) == [Coordinate("B", 1)]


def test_bishop_blocked_corner():
    bishop = Bishop(B, Coordinate("A", 1))
    enemy = Knight(W, Coordinate("B", 2))
    assert BishopRules().get_moves(bishop, [bishop, enemy]) == [Coordinate("B", 2)]


def test_bishop_empty_board_moves_are_diagonal():
    bishop = Bishop(W, Coordinate("C", 5))
    moves = BishopRules().get_moves(bishop, [bishop])
    assert _all_valid_unique(moves, bishop.position)
    assert all(
        abs(ord(m.file) - ord("C")) == abs(m.rank - 5) for m in moves
    )


@pytest.mark.parametrize("square", [Coordinate("A", 1), Coordinate("D", 4), Coordinate("H", 3)])
def test_queen_is_bishop_then_rook(square):
    queen = Queen(W, square)
    bishop = Bishop(W, square)
    rook = Rook(W, square)
    blocker = Knight(B, Coordinate("E", 5))
    queen_moves = QueenRules().get_moves(queen, [queen, blocker])
    expected = BishopRules().get_moves(bishop, [bishop, blocker]) + RookRules().get_moves(
        rook, [rook, blocker]
    )
    assert queen_moves == expected


def test_knight_corner_blocked_by_friend():
    knight = Knight(W, Coordinate("A", 1))
    friend = Bishop(W, Coordinate("B", 3))
    enemy = Bishop(B, Coordinate("C", 2))
    assert KnightRules().get_moves(knight, [knight, friend, enemy]) == [Coordinate("C", 2)]


def test_knight_moves_are_l_shaped():
    knight = Knight(B, Coordinate("E", 5))
    moves = KnightRules().get_moves(knight, [knight])
    assert _all_valid_unique(moves, knight.position)
    assert all(abs(ord(m.file) - ord("E")) * abs(m.rank - 5) == 2 for m in moves)


def test_knight_off_board_raises():
    knight = Knight(W, Coordinate("A", 9))
    with pytest.raises(ValueError, match="ChessPiece is out of the Chessboard"):
        KnightRules().get_moves(knight, [knight])


@pytest.mark.parametrize(
    "rules, piece",
    [
        (BishopRules(), Rook(W, Coordinate("D", 4))),
        (QueenRules(), Bishop(W, Coordinate("D", 4))),
        (RookRules(), King(W, Coordinate("D", 4))),
        (KnightRules(), Queen(W, Coordinate("D", 4))),
    ],
)
def test_wrong_piece_kind_gives_no_moves(rules, piece):
    assert rules.get_moves(piece, [piece]) == []


@pytest.mark.parametrize("rules", [BishopRules(), QueenRules(), RookRules(), KnightRules()])
def test_missing_piece_gives_no_moves(rules):
    assert rules.get_moves(None, []) == []


def test_subclass_is_not_accepted():
    class FancyBishop(Bishop):
        pass

    piece = FancyBishop(W, Coordinate("D", 4))
    assert BishopRules().get_moves(piece, [piece]) == []


def test_plain_piece_gives_no_moves():
    piece = Piece(W, Coordinate("D", 4))
    assert QueenRules().get_moves(piece, [piece]) == []