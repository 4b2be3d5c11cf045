import io
import re

from consolechess.chessboard import Chessboard
from consolechess.coordinate import FILES, Coordinate
from consolechess.display import ORIGINAL_TEXT_COLOR, ChessboardDisplayer
from consolechess.initializer import init_normal_board
from consolechess.kinds import PieceColor
from consolechess.signals import PieceSignalDirector

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip(text):
    return _ANSI.sub("", text)


def sq(name):
    return Coordinate(name[0], int(name[1:]))


def new_board():
    director = PieceSignalDirector()
    return Chessboard(init_normal_board(director), director)


def test_back_rank_row_letters():
    board = new_board()
    stream = io.StringIO()
    ChessboardDisplayer(board, stream).show_row_with_rank(8, ORIGINAL_TEXT_COLOR)
    assert strip(stream.getvalue()) == "RkBQKBkR"


def test_pawn_and_empty_rows():
    board = new_board()
    stream = io.StringIO()
    displayer = ChessboardDisplayer(board, stream)
    displayer.show_row_with_rank(2, ORIGINAL_TEXT_COLOR)
    assert strip(stream.getvalue()) == "P" * len(FILES)
    stream.seek(0)
    stream.truncate()
    displayer.show_row_with_rank(5, ORIGINAL_TEXT_COLOR)
    assert strip(stream.getvalue()) == " " * len(FILES)


def test_chosen_square_is_highlighted():
    board = new_board()
    stream = io.StringIO()
    displayer = ChessboardDisplayer(None, stream)
    displayer = ChessboardDisplayer(board, io.StringIO())
    displayer._stream = stream
    assert board.try_init_piece(sq("E2"))
    stream.seek(0)
    stream.truncate()
    displayer.show_row_with_rank(2, ORIGINAL_TEXT_COLOR)
    assert "\x1b[97;43mP" in stream.getvalue()


def test_board_update_redraws():
    board = new_board()
    stream = io.StringIO()
    ChessboardDisplayer(board, stream)
    assert stream.getvalue() == ""
    board.try_init_piece(sq("E2"))
    first = stream.getvalue()
    assert FILES in first
    board.try_move_piece(sq("E4"))
    assert len(stream.getvalue()) > len(first)


def test_taken_pieces():
    board = new_board()
    stream = io.StringIO()
    displayer = ChessboardDisplayer(board, io.StringIO())
    for origin, target in (("E2", "E4"), ("D7", "D5"), ("E4", "D5")):
        assert board.try_init_piece(sq(origin))
        assert board.try_move_piece(sq(target))
    displayer._stream = stream
    displayer.show_taken_pieces(PieceColor.BLACK)
    assert stream.getvalue() == "\nP\n\n"
    stream.seek(0)
    stream.truncate()
    displayer.show_taken_pieces(PieceColor.WHITE)
    assert stream.getvalue() == "\n\n\n"


def test_show_empty_writes_newline():
    stream = io.StringIO()
    ChessboardDisplayer(None, stream).show_empty()
    assert stream.getvalue() == "\n"