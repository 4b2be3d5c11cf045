"""Which pieces the side to move can play, and where the chosen piece can go."""

from __future__ import annotations

from typing import Sequence

from .checking import MoveChecker
from .coordinate import Coordinate
from .finder import PieceFinder
from .pieces import Piece
from .player import Player


class MoveValidator:
    """Keeps the movable pieces of the player to move and the chosen piece's targets."""

    def __init__(self, pieces_on_board: Sequence[Piece], player: Player) -> None:
        self._pieces_on_board = pieces_on_board
        self._player = player
        self._pieces_can_move: list[Piece] = []
        self._possible_moves: list[Coordinate] = []
        self.calculate_pieces_can_move()

    @property
    def possible_moves(self) -> list[Coordinate]:
        return list(self._possible_moves)

    @property
    def pieces_can_move(self) -> list[Piece]:
        return list(self._pieces_can_move)

    @property
    def pieces_can_move_count(self) -> int:
        return len(self._pieces_can_move)

    def calculate_pieces_can_move(self) -> None:
        """Collect the player's pieces that have at least one legal move."""
        self.clear_pieces_can_move()
        self.clear_possible_moves()
        board = self._pieces_on_board
        self._pieces_can_move = [
            piece
            for piece in board
            if piece.color is self._player.color and MoveChecker(piece).filtered_moves(board)
        ]

    def calculate_possible_moves(self, piece: Piece | None) -> None:
        """Store the legal targets of a movable piece; other pieces change nothing."""
        if piece is None or not any(candidate is piece for candidate in self._pieces_can_move):
            return
        self._possible_moves = MoveChecker(piece).filtered_moves(self._pieces_on_board)

    def clear_possible_moves(self) -> None:
        self._possible_moves = []

    def clear_pieces_can_move(self) -> None:
        self._pieces_can_move = []

    def is_coordinate_in_pieces_can_move(self, coordinate: Coordinate) -> bool:
        return PieceFinder(self._pieces_can_move).find(coordinate) is not None

    def is_coordinate_in_possible_moves(self, coordinate: Coordinate) -> bool:
        return coordinate in self._possible_moves

    def is_valid_move(self, piece: Piece | None, to: Coordinate) -> bool:
        if piece is None:
            return False
        return to in self._possible_moves