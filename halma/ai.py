"""A greedy computer player."""

from .board import SIZE, Board
from .rules import is_valid_move


def _encode(start_x: int, start_y: int, end_x: int, end_y: int) -> int:
    return 1000 * start_y + 100 * start_x + 10 * end_y + end_x


def choose_move(player: int, board: Board) -> int | None:
    """Pick the longest forward move for ``player``, or None when there is none.

    Each piece is scored by the squared length of its longest move towards
    the bottom-right; the first piece with the best score wins. Until some
    forward move has been seen, sideways moves along the far anti-diagonals
    are scored too.
    """
    coords = range(1, SIZE + 1)
    best = []
    distance = 0
    for start_y in coords:
        for start_x in coords:
            if board[(start_x, start_y)] != player:
                continue
            piece_distance, piece_move = 0, None
            for end_y in coords:
                for end_x in coords:
                    move = _encode(start_x, start_y, end_x, end_y)
                    if not is_valid_move(board, move, player):
                        continue
                    length = (end_y - start_y) ** 2 + (end_x - start_x) ** 2
                    if end_x >= start_x and end_y >= start_y:
                        distance = length
                        if distance > piece_distance:
                            piece_distance, piece_move = distance, move
                    if (
                        distance == 0
                        and end_x + end_y >= 14
                        and end_x + end_y == start_x + start_y
                    ):
                        distance = length
                        if distance > piece_distance:
                            piece_distance, piece_move = distance, move
            best.append((piece_distance, piece_move))
    if not best:
        return None
    return max(best, key=lambda entry: entry[0])[1]