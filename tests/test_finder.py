from consolechess.coordinate import Coordinate
from consolechess.finder import PieceFinder
from consolechess.kinds import PieceColor
from consolechess.pieces import Bishop, Knight, Queen


def test_find_returns_piece_on_square():
    bishop = Bishop(PieceColor.WHITE, Coordinate("C", 1))
    knight = Knight(PieceColor.BLACK, Coordinate("B", 8))
    finder = PieceFinder([bishop, knight])
    assert finder.find(Coordinate("C", 1)) is bishop
    assert finder.find(Coordinate("B", 8)) is knight


def test_find_empty_square_returns_none():
    finder = PieceFinder([Queen(PieceColor.WHITE, Coordinate("D", 1))])
    assert finder.find(Coordinate("D", 2)) is None


def test_empty_collection():
    finder = PieceFinder([])
    assert finder.find(Coordinate()) is None
    assert len(finder) == 0


def test_later_piece_wins_on_shared_square():
    first = Bishop(PieceColor.WHITE, Coordinate("E", 4))
    second = Knight(PieceColor.BLACK, Coordinate("E", 4))
    finder = PieceFinder([first, second])
    assert finder.find(Coordinate("E", 4)) is second
    assert len(finder) == 1


def test_contains():
    finder = PieceFinder([Queen(PieceColor.BLACK, Coordinate("D", 8))])
    assert Coordinate("D", 8) in finder
    assert Coordinate("D", 7) not in finder


def test_index_is_a_snapshot():
    queen = Queen(PieceColor.WHITE, Coordinate("D", 1))
    finder = PieceFinder([queen])
    queen.move(Coordinate("D", 5))
    assert finder.find(Coordinate("D", 1)) is queen
    assert finder.find(Coordinate("D", 5)) is None