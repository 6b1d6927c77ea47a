import logging

import pytest

from ttt_minimax.agents import MinimaxAgent, get_best_move, minimax
from ttt_minimax.agents.minmax import NO_MOVE
from ttt_minimax.envs import Board, Mark, TicTacToeEnv

X = Mark.PLAYER_ONE
O = Mark.PLAYER_TWO


@pytest.fixture
def threat_board():
    # X threatens (2, 0), O threatens (2, 1)
    board = Board(3)
    board.set_for_player(X, 0, 0)
    board.set_for_player(X, 1, 0)
    board.set_for_player(O, 0, 1)
    board.set_for_player(O, 1, 1)
    return board


def test_empty_board_is_a_draw():
    board = Board(3)
    assert minimax(board, 0, True) == 0
    assert board.n_occupied == 0
    assert list(board.empty_fields()) == [(x, y) for x in range(3) for y in range(3)]


def test_terminal_score_scales_with_depth(threat_board):
    threat_board.set_for_player(X, 2, 0)
    # player one just won, so it is player two's turn
    assert minimax(threat_board, 4, False) == -(9 - 4)
    assert minimax(threat_board, 0, False) == -9
    assert minimax(threat_board, 4, True) == 9 - 4


def test_immediate_win_is_preferred(threat_board):
    assert minimax(threat_board, 4, True) == -(9 - 5)
    assert minimax(threat_board, 4, False) == 9 - 5


def test_best_move_takes_the_win(threat_board):
    assert get_best_move(threat_board, True) == (2, 0)
    assert get_best_move(threat_board, False) == (2, 1)
    assert threat_board.n_occupied == 4


def test_best_move_blocks():
    board = Board(3)
    board.set_for_player(X, 0, 0)
    board.set_for_player(X, 1, 1)
    board.set_for_player(O, 0, 1)
    assert get_best_move(board, False) == (2, 2)


def test_best_move_is_empty_and_deterministic():
    board = Board(3)
    board.set_for_player(X, 1, 1)
    agent = MinimaxAgent()
    before = [column[:] for column in board.grid]

    first = agent.get_best_move(board, False)
    second = agent.get_best_move(board, False)
    assert first == second
    assert board.is_field_empty(*first)
    assert board.grid == before
    assert board.n_occupied == 1
    assert agent.n_visited > 0


def test_no_move_on_full_board():
    board = Board(3)
    for idx in range(1, 10):
        board.set_for_player_by_id(X if idx % 2 else O, idx)
    assert get_best_move(board, True) == NO_MOVE


def test_large_board_logs_warning(caplog):
    board = Board(4)
    for x in range(4):
        for y in range(4):
            if (x, y) != (3, 3):
                board.set_for_player(X if (x + 2 * y) % 3 else O, x, y)
    with caplog.at_level(logging.WARNING):
        move = get_best_move(board, True)
    assert move == (3, 3)
    assert "4x4" in caplog.text


def test_ties_go_to_first_field_in_row_major_order():
    # every 3x3 opening is a draw
    board = Board(3)
    assert get_best_move(board, True) == (0, 0)

    board.set_for_player(X, 0, 0)
    # only the centre holds the draw against a corner opening
    assert get_best_move(board, False) == (1, 1)


def test_ties_on_2x2_board():
    # every pair of fields is a line, so all openings win equally fast
    board = Board(2)
    assert get_best_move(board, True) == (0, 0)

    board.set_for_player(X, 0, 0)
    # every reply loses on the next move
    assert get_best_move(board, False) == (0, 1)


def test_get_action_moves_for_current_player():
    env = TicTacToeEnv(board_size=3)
    env.reset()
    env.step((0, 0))
    assert MinimaxAgent().get_action(env) == (1, 1)
