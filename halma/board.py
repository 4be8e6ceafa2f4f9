"""Board layout, starting position and text rendering."""

EMPTY = 0
BLUE = 1
RED = 2

SIZE = 8

# Blue starts in the top-left corner, red in the bottom-right one.
BLUE_CAMP = ((1, 1), (2, 1), (3, 1), (1, 2), (2, 2), (1, 3))
RED_CAMP = ((8, 6), (7, 7), (8, 7), (6, 8), (7, 8), (8, 8))

SYMBOLS = {EMPTY: ".", BLUE: "#", RED: "O"}

Board = dict[tuple[int, int], int]


def initialize_board() -> Board:
    """Return a fresh board keyed by (x, y), both running from 1 to 8."""
    board = {
        (x, y): EMPTY
        for y in range(1, SIZE + 1)
        for x in range(1, SIZE + 1)
    }
    board.update(dict.fromkeys(BLUE_CAMP, BLUE))
    board.update(dict.fromkeys(RED_CAMP, RED))
    return board


def render_board(board: Board) -> str:
    """Render the board as text, with column and row numbers."""
    header = "   " + "".join(f"{column} " for column in range(1, SIZE + 1))
    rows = (
        f"{y}  "
        + "".join(
            f"{SYMBOLS.get(board[(x, y)], '.')} " for x in range(1, SIZE + 1)
        )
        for y in range(1, SIZE + 1)
    )
    return "\n".join([header, *rows]) + "\n"