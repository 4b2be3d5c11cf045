"""Chess pieces: their colour, type, square and move-related state."""

from __future__ import annotations

from typing import Any, Callable, ClassVar

from .coordinate import CHESSBOARD_SIZE, FIRST_FILE, LAST_FILE, Coordinate
from .kinds import (
    COUNT_OF_BISHOP_KNIGHT_ROOK_PER_COLOR,
    CastleSide,
    ErrorKind,
    PieceColor,
    PieceColorAndType,
    PieceType,
    error_message,
)
from .signals import Connection, PieceSignalDirector, Signal


def _back_rank(color: PieceColor) -> int:
    if color is PieceColor.BLACK:
        return CHESSBOARD_SIZE
    if color is PieceColor.WHITE:
        return 1
    raise ValueError(error_message(ErrorKind.OUT_OF_CHESSBOARD))


def _check_order_number(order_number: int) -> None:
    if not 1 <= order_number <= COUNT_OF_BISHOP_KNIGHT_ROOK_PER_COLOR:
        raise ValueError(
            error_message(ErrorKind.OUT_OF_COUNT_OF_BISHOP_KNIGHT_ROOK_WITH_ONE_COLOR)
        )


class Piece:
    """A piece of some colour standing on a square."""

    piece_type: ClassVar[PieceType] = PieceType.NONE

    def __init__(
        self, color: PieceColor = PieceColor.NONE, position: Coordinate | None = None
    ) -> None:
        self.color = color
        self.position = position if position is not None else Coordinate()

    @property
    def color_and_type(self) -> PieceColorAndType:
        return PieceColorAndType(self.color, self.piece_type)

    def move(self, to: Coordinate, is_real_move: bool = True) -> None:
        """Put the piece on another square.

        A move that is not real only probes a position and leaves the
        piece's move history untouched.
        """
        self.position = to

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name}, {self.position})"


class Castable:
    """Mixin for pieces that may take part in castling."""

    can_make_castling: bool = False


class Bishop(Piece):
    piece_type = PieceType.BISHOP

    @classmethod
    def starting(cls, color: PieceColor, order_number: int) -> Bishop:
        """Create the first or second bishop of a colour on its home square."""
        _check_order_number(order_number)
        file = "C" if order_number == 1 else "F"
        return cls(color, Coordinate(file, _back_rank(color)))


class Knight(Piece):
    piece_type = PieceType.KNIGHT

    @classmethod
    def starting(cls, color: PieceColor, order_number: int) -> Knight:
        """Create the first or second knight of a colour on its home square."""
        _check_order_number(order_number)
        file = "B" if order_number == 1 else "G"
        return cls(color, Coordinate(file, _back_rank(color)))


class Queen(Piece):
    piece_type = PieceType.QUEEN

    @classmethod
    def starting(cls, color: PieceColor) -> Queen:
        """Create a queen of a colour on its home square."""
        return cls(color, Coordinate("D", _back_rank(color)))


class King(Castable, Piece):
    """The king; announces castling and follows check notifications."""

    piece_type = PieceType.KING

    def __init__(
        self,
        color: PieceColor,
        position: Coordinate | None = None,
        signal_director: PieceSignalDirector | None = None,
    ) -> None:
        if position is None:
            position = Coordinate("E", _back_rank(color))
        super().__init__(color, position)
        self.can_make_castling = True
        self.is_check = False
        self._signal_castling = Signal()
        if signal_director is not None:
            signal_director.connect_move_with_check(self._on_move_with_check)

    def _on_move_with_check(self, is_check: bool) -> None:
        self.is_check = is_check

    def move(self, to: Coordinate, is_real_move: bool = True) -> None:
        if is_real_move:
            self.can_make_castling = False
            if abs(ord(self.position.file) - ord(to.file)) > 1:
                side = CastleSide.RIGHT if to.file > self.position.file else CastleSide.LEFT
                self._signal_castling.emit(to, side)
        super().move(to, is_real_move)

    def connect_castling(
        self, subscriber: Callable[[Coordinate, CastleSide], Any]
    ) -> Connection:
        """Subscribe to castling moves; the slot gets the king's target and side."""
        return self._signal_castling.connect(subscriber)


class Pawn(Piece):
    """A pawn; tracks its first move and whether it can be taken en passant."""

    piece_type = PieceType.PAWN

    def __init__(
        self,
        color: PieceColor,
        position: Coordinate,
        signal_director: PieceSignalDirector | None = None,
    ) -> None:
        super().__init__(color, position)
        self.can_en_passant = False
        self.is_not_moved = True
        self._is_on_first_move = False
        if signal_director is not None:
            signal_director.connect_move(self._on_any_move)

    @classmethod
    def starting(
        cls,
        color: PieceColor,
        file: str,
        signal_director: PieceSignalDirector | None = None,
    ) -> Pawn:
        """Create a pawn of a colour on its home square in the given file."""
        if len(file) != 1 or not FIRST_FILE <= file <= LAST_FILE:
            raise ValueError(error_message(ErrorKind.OUT_OF_CHESSBOARD))
        if color is PieceColor.BLACK:
            rank = CHESSBOARD_SIZE - 1
        elif color is PieceColor.WHITE:
            rank = 2
        else:
            raise ValueError(error_message(ErrorKind.OUT_OF_CHESSBOARD))
        return cls(color, Coordinate(file, rank), signal_director)

    def _on_any_move(self) -> None:
        if not self._is_on_first_move:
            self.can_en_passant = False
        self._is_on_first_move = False

    def move(self, to: Coordinate, is_real_move: bool = True) -> None:
        if is_real_move:
            if abs(to.rank - self.position.rank) == 2:
                self.can_en_passant = self.is_not_moved
            else:
                self.can_en_passant = False
            self._is_on_first_move = self.is_not_moved
            self.is_not_moved = False
        super().move(to, is_real_move)


class Rook(Castable, Piece):
    """A rook; follows its king's castling when it is still able to castle."""

    piece_type = PieceType.ROOK

    def __init__(
        self,
        color: PieceColor,
        position: Coordinate,
        king: King | None = None,
    ) -> None:
        super().__init__(color, position)
        self.can_make_castling = False
        self._castling_connection: Connection | None = None
        if king is not None:
            self._castling_connection = king.connect_castling(self._on_castling)

    @classmethod
    def starting(
        cls, color: PieceColor, order_number: int, king: King | None = None
    ) -> Rook:
        """Create the first or second rook of a colour on its home square."""
        _check_order_number(order_number)
        file = FIRST_FILE if order_number == 1 else LAST_FILE
        rook = cls(color, Coordinate(file, _back_rank(color)), king)
        rook.can_make_castling = True
        return rook

    def _on_castling(self, to: Coordinate, side: CastleSide) -> None:
        if self.can_make_castling:
            if self.position.file == FIRST_FILE and side is CastleSide.LEFT:
                self.move(to.offset(1, 0))
            elif self.position.file == LAST_FILE and side is CastleSide.RIGHT:
                self.move(to.offset(-1, 0))
        if self._castling_connection is not None:
            self._castling_connection.disconnect()

    def move(self, to: Coordinate, is_real_move: bool = True) -> None:
        if is_real_move:
            self.can_make_castling = False
        super().move(to, is_real_move)