# consolechess

A chess rules engine for two players sharing one keyboard, with the pieces
needed to play it in a colour terminal. The board highlights the pieces that
can move and the squares the chosen piece may go to. The engine covers:

- check, and filtering out moves that would leave one's own king in check,
- castling on either side,
- en passant,
- pawn promotion to bishop, knight, queen or rook,
- draws: no legal move for the side to move, 75 moves without a pawn move or
  capture, and insufficient material.

The package has no runtime dependencies beyond the standard library.

## Board and notation

Files are the letters `A`–`H` and ranks are the numbers `1`–`8`. A square is a
`consolechess.coordinate.Coordinate`, for example `Coordinate("E", 2)`;
`is_position_valid` tells whether a square lies on the board. White moves
first and starts on ranks 1 and 2.

On the printed board each piece is one letter (`consolechess.kinds.type_to_string`):

| Letter | Piece  |
|--------|--------|
| `B`    | Bishop |
| `K`    | King   |
| `k`    | Knight |
| `P`    | Pawn   |
| `Q`    | Queen  |
| `R`    | Rook   |

The text colour shows which side owns the piece. Captured pieces are listed
above the board (white) and below it (black).

## Using the engine

```python
from consolechess.chessboard import Chessboard
from consolechess.coordinate import Coordinate
from consolechess.drawing import DrawChecker
from consolechess.initializer import init_normal_board
from consolechess.promotion import PromotePieceInputer
from consolechess.signals import PieceSignalDirector

signals = PieceSignalDirector()
board = Chessboard(init_normal_board(signals), signals, PromotePieceInputer(input))
draws = DrawChecker()

if board.try_init_piece(Coordinate("E", 2)):
    board.try_move_piece(Coordinate("E", 4))

print(draws.is_draw(board))
```

- `Chessboard.try_init_piece(origin)` selects the piece on a square and, if it
  is one the side to move can play, computes its legal targets. It returns
  `False` if the square is empty or no targets are known. Choosing a piece the
  side to move cannot play leaves the previously computed targets in place.
- `Chessboard.try_move_piece(to)` moves the selected piece and returns `False`
  if the target is not one of its legal moves. After a move the turn passes
  to the other side.
- `Chessboard.connect_chessboard_updated(subscriber)` registers a callable
  that runs whenever what the board shows changes.
- `DrawChecker.is_draw(board)` counts moves without a pawn move or capture, so
  call it once after every move. `is_insufficient_material(board)` can also be
  used on its own.

When a white pawn reaches rank 8 or a black pawn rank 1, the
`PromotePieceInputer` asks for the new piece through the `read_line` callable
it was given. The first letter of the answer is taken case-insensitively:
`B` for bishop, `K` for knight, `Q` for queen, `R` for rook. After any other
answer it prints an error, reads one more line as a pause, and asks again.
If no inputer is given to `Chessboard`, one reading from `input()` is used.

Lower-level pieces are available too: the piece classes in
`consolechess.pieces`, the per-piece move rules in `consolechess.rules`,
`consolechess.king_rules` and `consolechess.pawn_rules`, check detection and
`MoveChecker` in `consolechess.checking`, and `MoveValidator`,
`PieceDirector` and `Player`.

## Playing in the terminal

The console pieces connect the engine to a keyboard and a text stream:

- `display.ChessboardDisplayer(chessboard, stream)` redraws the board, using
  ANSI escape sequences for colour and clearing the screen, each time the
  chessboard reports an update.
- `console_input.HandlerInputer(read_line)` reads a file letter and a rank
  number for the `FROM` and `TO` squares. An unreadable rank becomes 0, so the
  square is off the board.
- `console_input.LabelShower(inputer, stream)` prints the prompts the inputer
  emits.
- `controller.Controller(chessboard)` passes the chosen squares to the board
  and notifies its subscribers after every move attempt.

```python
import sys

from consolechess.console_input import HandlerInputer, LabelShower
from consolechess.controller import Controller
from consolechess.display import ChessboardDisplayer

inputer = HandlerInputer(input)
LabelShower(inputer, sys.stdout)
ChessboardDisplayer(board, sys.stdout).show()
controller = Controller(board)

while not draws.is_draw(board):
    if controller.try_init_piece(inputer.enter_from()):
        controller.try_move_piece(inputer.enter_to())
```

## What it does not do

- There is no command that starts a game; a game loop like the one above has
  to be written by the caller.
- Checkmate is not reported on its own: a position where the side to move has
  no legal move, checkmate or stalemate, makes `is_draw` return `True`.
- There is no saving or loading of games and no move notation.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.