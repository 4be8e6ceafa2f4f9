"""Move validation, piece movement and game-end detection."""

from enum import IntEnum

from .board import BLUE, BLUE_CAMP, EMPTY, RED, RED_CAMP, SIZE, Board

INVALID_FORMAT = "Invalid input format, please input again: "
OUT_OF_BOARD = "Input out of the game board, please input again: "
INVALID_START = "Invalid starting location, please input again: "
INVALID_END = "Invalid ending location, please input again: "
RULE_VIOLATION = "The move violates the game rule, please input again."

DRAW_MOVE_LIMIT = 200

DIRECTIONS = (
    (1, 1), (1, -1), (-1, 1), (-1, -1),
    (1, 0), (0, 1), (-1, 0), (0, -1),
)


class GameResult(IntEnum):
    """State of the game after a move."""

    ONGOING = 0
    BLUE_WINS = 1
    RED_WINS = 2
    DRAW = 3


class MoveError(ValueError):
    """Raised when a move cannot be played."""


def is_within_board(x: int, y: int) -> bool:
    """Tell whether the coordinates lie on the board."""
    return 1 <= x <= SIZE and 1 <= y <= SIZE


def is_single_step(start_x: int, start_y: int, end_x: int, end_y: int) -> bool:
    """Tell whether the end square touches the start square, diagonals included."""
    dx = abs(start_x - end_x)
    dy = abs(start_y - end_y)
    return max(dx, dy) == 1


def is_jump(board: Board, start_x: int, start_y: int, end_x: int, end_y: int,
            visited: set | None = None) -> bool:
    """Tell whether a chain of symmetric jumps leads from start to end.

    A piece jumps over one piece at any distance along a line and lands as
    far beyond it as it was before it; squares in between must be empty.
    Landing squares already tried are recorded in ``visited``.
    """
    if visited is None:
        visited = set()
    for dx, dy in DIRECTIONS:
        x, y = start_x + dx, start_y + dy
        steps = 1
        while is_within_board(x, y) and board[(x, y)] == EMPTY:
            x += dx
            y += dy
            steps += 1
        if not is_within_board(x, y):
            continue
        landing = (x + dx * steps, y + dy * steps)
        if (
            not is_within_board(*landing)
            or board[landing] != EMPTY
            or landing in visited
        ):
            continue
        visited.add(landing)
        if any(board[(x + dx * j, y + dy * j)] != EMPTY for j in range(1, steps)):
            continue
        if landing == (end_x, end_y):
            return True
        if is_jump(board, landing[0], landing[1], end_x, end_y, visited):
            return True
    return False


def make_move(board: Board, start_x: int, start_y: int, end_x: int, end_y: int) -> None:
    """Move the piece on the start square to the end square."""
    board[(end_x, end_y)] = board[(start_x, start_y)]
    board[(start_x, start_y)] = EMPTY


def split_move(move: int) -> tuple[int, int, int, int]:
    """Split a four-digit move ``YXyx`` into (start_x, start_y, end_x, end_y)."""
    start, end = divmod(move, 100)
    start_y, start_x = divmod(start, 10)
    end_y, end_x = divmod(end, 10)
    return start_x, start_y, end_x, end_y


def validate_move(board: Board, move: int, player: int) -> tuple[int, int, int, int]:
    """Check a move for ``player`` and return its coordinates.

    Raises MoveError describing the first problem found.
    """
    if move > 9999 or move < 1000:
        raise MoveError(INVALID_FORMAT)
    start_x, start_y, end_x, end_y = split_move(move)
    if not is_within_board(start_x, start_y) or not is_within_board(end_x, end_y):
        raise MoveError(OUT_OF_BOARD)
    if board[(start_x, start_y)] != player:
        raise MoveError(INVALID_START)
    if board[(end_x, end_y)] != EMPTY:
        raise MoveError(INVALID_END)
    if not (
        is_single_step(start_x, start_y, end_x, end_y)
        or is_jump(board, start_x, start_y, end_x, end_y)
    ):
        raise MoveError(RULE_VIOLATION)
    return start_x, start_y, end_x, end_y


def is_valid_move(board: Board, move: int, player: int) -> bool:
    """Tell whether ``player`` may play ``move``."""
    try:
        validate_move(board, move, player)
    except MoveError:
        return False
    return True


def check_game_over(board: Board, move_count: int) -> GameResult:
    """Report a win when a side fills the opposite camp, or a draw at the move limit."""
    blue_won = all(board[square] == BLUE for square in RED_CAMP)
    red_won = all(board[square] == RED for square in BLUE_CAMP)
    if blue_won:
        return GameResult.BLUE_WINS
    if red_won:
        return GameResult.RED_WINS
    if move_count >= DRAW_MOVE_LIMIT:
        return GameResult.DRAW
    return GameResult.ONGOING