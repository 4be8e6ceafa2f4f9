# halma

Halma played in the terminal on an 8x8 board, either by two people at one
keyboard or by one person against a simple computer player.

Blue (`#`) starts with six pieces in the top-left corner and Red (`O`) with six
pieces in the bottom-right corner. Each side tries to fill the other's corner.
Blue moves first.

## Installing

```
pip install .
```

## Playing

```
halma [MODE]
```

`MODE` is `1` for two players, or `2` to play Red against the computer, which
plays Blue and moves first. If `MODE` is not given, the first number read from
standard input is taken as the mode (and `1` is used if that is not a number).
Any other mode ends the program without starting a game.

Each move is a four-digit number `YXyx`: the row and column of the piece to
move, then the row and column of the square it goes to. Rows and columns run
from 1 to 8. For example, `3142` moves the piece in row 3, column 1 to row 4,
column 2.

A piece may move one square in any of the eight directions, or jump. A jump goes
over one piece that lies any number of squares away along a line and lands the
same number of squares beyond it; every square in between must be empty. Jumps
may be chained in one move.

When a move is not allowed, the game prints why (bad format, off the board,
wrong starting square, occupied ending square, or against the rules) and reads
another. Input that is not a number counts as a bad format.

The game ends when one side fills the other's starting corner, and is a draw
after 200 moves in total. It also stops quietly when the input runs out.

The computer player looks, for each of its pieces, for the longest move towards
the bottom-right corner, and plays the best of these. It does not plan ahead.

## Using it as a library

```python
from halma.board import initialize_board, render_board
from halma.rules import is_valid_move, validate_move, check_game_over, MoveError
from halma.ai import choose_move

board = initialize_board()          # dict keyed by (x, y)
print(render_board(board))

move = choose_move(1, board)        # four-digit move, or None
print(move, is_valid_move(board, move, 1))

try:
    validate_move(board, 1111, 1)
except MoveError as exc:
    print(exc)

print(check_game_over(board, 0))    # GameResult.ONGOING
```

`halma.cli.play(mode, stream, out)` runs a whole game reading moves from any
text stream and writing to another, and returns a `GameResult`.

## What it does not do

There is no saving or loading of games, no undo, and the computer can only play
Blue.

## Running the tests

```
pip install .[test]
pytest
```