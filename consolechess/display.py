"""Drawing the board on a colour terminal."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from .coordinate import CHESSBOARD_SIZE, FILES, Coordinate
from .kinds import ConsoleColor, PieceColor, PieceColorAndType, type_to_string

if TYPE_CHECKING:
    from .chessboard import Chessboard

ORIGINAL_TEXT_COLOR = 7
_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_RESET = "\x1b[0m"


def _ansi_code(console_color: int, base: int) -> int:
    value = console_color & 0x0F
    # Console colours put blue in bit 0 and red in bit 2; ANSI swaps them.
    index = ((value & 1) << 2) | (value & 2) | ((value & 4) >> 2)
    return base + index + (60 if value & 8 else 0)


def _color_sequence(text_color: int, background_color: int) -> str:
    return f"\x1b[{_ansi_code(text_color, 30)};{_ansi_code(background_color, 40)}m"


def _text_color(color_and_type: PieceColorAndType, original_text_color: int) -> int:
    if color_and_type.color is PieceColor.BLACK:
        return ConsoleColor.BLACK
    if color_and_type.color is PieceColor.WHITE:
        return ConsoleColor.WHITE
    return original_text_color


class ChessboardDisplayer:
    """Writes the board, taken pieces and move hints to a text stream.

    The board is redrawn whenever the chessboard announces an update.
    """

    def __init__(self, chessboard: Chessboard | None, stream: TextIO | None = None) -> None:
        self._chessboard = chessboard
        self._stream = stream if stream is not None else sys.stdout
        if chessboard is not None:
            chessboard.connect_chessboard_updated(self.show)

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def _background_color(self, coordinate: Coordinate) -> int:
        board = self._chessboard
        is_square_black = (ord(coordinate.file) + 1 + coordinate.rank) % 2 == 1
        validator = board.move_validator
        if coordinate == board.origin:
            return ConsoleColor.BROWN
        if coordinate == board.target:
            return ConsoleColor.YELLOW
        if validator.is_coordinate_in_pieces_can_move(coordinate):
            return ConsoleColor.BLUE if is_square_black else ConsoleColor.CERULEAN
        if validator.is_coordinate_in_possible_moves(coordinate):
            return ConsoleColor.DARK_RED if is_square_black else ConsoleColor.RED
        return ConsoleColor.GRAY if is_square_black else ConsoleColor.GREEN

    def _show_files(self, one_digit: bool) -> None:
        self.show_empty()
        self._write("   " if one_digit else "\t")
        self._write(FILES)
        self.show_empty()
        self.show_empty()

    def _show_rank(self, y: int, one_digit: bool) -> None:
        space = " " if one_digit else "\t"
        self._write(f"{space}{y}{space}")

    def _show_board_with_coordinates(self) -> None:
        one_digit = CHESSBOARD_SIZE < 10
        self._show_files(one_digit)
        for y in range(CHESSBOARD_SIZE, 0, -1):
            self._show_rank(y, one_digit)
            self.show_row_with_rank(y, ORIGINAL_TEXT_COLOR)
            self._write(_RESET)
            self._show_rank(y, one_digit)
            self.show_empty()
        self._show_files(one_digit)

    def show(self) -> None:
        """Clear the screen and draw taken pieces, the board and taken pieces again."""
        self._write(_CLEAR_SCREEN)
        self.show_taken_pieces(PieceColor.WHITE)
        self._show_board_with_coordinates()
        self.show_taken_pieces(PieceColor.BLACK)
        self._stream.flush()

    def show_row_with_rank(self, y: int, original_text_color: int) -> None:
        """Draw one rank's squares, coloured by piece and by move hints."""
        director = self._chessboard.piece_director
        for file in FILES:
            coordinate = Coordinate(file, y)
            color_and_type = director.get_color_and_type(coordinate)
            text_color = _text_color(color_and_type, original_text_color)
            background = self._background_color(coordinate)
            self._write(_color_sequence(text_color, background))
            self._write(type_to_string(color_and_type.piece_type)[0])

    def show_empty(self) -> None:
        self._write("\n")

    def show_taken_pieces(self, color: PieceColor) -> None:
        """Draw the letters of the taken pieces of one colour."""
        self.show_empty()
        for piece in self._chessboard.piece_director.eaten_pieces:
            if piece.color is color:
                self._write(type_to_string(piece.piece_type))
        self.show_empty()
        self.show_empty()