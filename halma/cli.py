"""Command-line game: two players, or a human against the computer."""

import argparse
import re
import sys
from typing import TextIO

from .ai import choose_move
from .board import BLUE, SYMBOLS, initialize_board, render_board
from .rules import (
    INVALID_FORMAT,
    GameResult,
    MoveError,
    check_game_over,
    make_move,
    split_move,
    validate_move,
)

_INTEGER = re.compile(r"[+-]?\d+")

_RESULT_LINES = {
    GameResult.BLUE_WINS: "Blue(#) wins!\n",
    GameResult.RED_WINS: "Red(O) wins!\n",
    GameResult.DRAW: "Draw!\n",
}


def _next_token(stream: TextIO) -> str:
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def read_move(stream: TextIO) -> int:
    """Read the next whitespace-separated integer from ``stream``.

    Raises EOFError at the end of input and ValueError for a token that is
    not an integer.
    """
    token = _next_token(stream)
    if not token:
        raise EOFError("no more input")
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def _human_turn(board, player: int, stream: TextIO, out: TextIO) -> bool:
    try:
        move = read_move(stream)
        coords = validate_move(board, move, player)
    except MoveError as error:
        out.write(f"{error}\n")
        return False
    except ValueError:
        out.write(f"{INVALID_FORMAT}\n")
        return False
    make_move(board, *coords)
    return True


def play(mode: int, stream: TextIO, out: TextIO) -> GameResult:
    """Run a game reading moves from ``stream`` and writing to ``out``.

    Mode 1 is two humans; mode 2 lets the computer play blue and move first.
    Returns the result, or GameResult.ONGOING if the input runs out.
    """
    if mode not in (1, 2):
        raise ValueError(f"unknown mode: {mode}")
    board = initialize_board()
    player = BLUE
    move_count = 0
    try:
        while True:
            out.write(render_board(board))
            out.write(f"\n{SYMBOLS[player]}'s turn.\n\n")
            if mode == 2 and player == BLUE:
                move = choose_move(player, board)
                out.write(f"{move or 0}\n")
                if move is not None:
                    make_move(board, *split_move(move))
            elif not _human_turn(board, player, stream, out):
                continue
            player = 3 - player
            move_count += 1
            result = check_game_over(board, move_count)
            if result is not GameResult.ONGOING:
                out.write(render_board(board))
                out.write(_RESULT_LINES[result])
                return result
    except EOFError:
        return GameResult.ONGOING


def main(argv=None) -> int:
    """Start a game; the mode comes from the arguments or the first input token."""
    parser = argparse.ArgumentParser(
        prog="halma",
        description="Play halma on an 8x8 board. Moves are four digits: "
        "start row, start column, end row, end column.",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        type=int,
        help="1 for two players, 2 to play red against the computer",
    )
    args = parser.parse_args(argv)
    mode = args.mode
    if mode is None:
        try:
            mode = read_move(sys.stdin)
        except (EOFError, ValueError):
            mode = 1
    if mode not in (1, 2):
        return 0
    play(mode, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())