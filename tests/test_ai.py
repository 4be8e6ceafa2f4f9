from halma.ai import choose_move
from halma.board import BLUE, EMPTY, RED, initialize_board
from halma.rules import is_valid_move, split_move


def board_with(pieces):
    board = {square: EMPTY for square in initialize_board()}
    board.update(pieces)
    return board


def test_initial_move_is_valid_and_forward():
    board = initialize_board()
    move = choose_move(BLUE, board)
    assert is_valid_move(board, move, BLUE) is True
    start_x, start_y, end_x, end_y = split_move(move)
    assert end_x >= start_x and end_y >= start_y


def test_choose_move_does_not_change_board():
    board = initialize_board()
    choose_move(BLUE, board)
    assert board == initialize_board()


def test_single_piece_prefers_diagonal_step():
    board = board_with({(1, 1): BLUE})
    assert choose_move(BLUE, board) == 1122


def test_prefers_jump():
    board = board_with({(1, 1): BLUE, (2, 2): RED})
    assert choose_move(BLUE, board) == 1133
    assert split_move(choose_move(BLUE, board)) == (1, 1, 3, 3)


def test_no_pieces_gives_none():
    board = board_with({})
    assert choose_move(BLUE, board) is None


def test_red_in_corner_has_no_scored_move():
    assert choose_move(RED, initialize_board()) is None


def test_best_piece_wins_over_earlier_piece():
    board = board_with({(1, 1): BLUE, (5, 5): BLUE, (6, 6): RED})
    move = choose_move(BLUE, board)
    assert split_move(move)[:2] == (5, 5)
    assert is_valid_move(board, move, BLUE) is True