import logging

from ..envs import Board, Mark, TicTacToeEnv
from typing import Tuple

# Full-depth search without pruning visits on the order of (N*N)! nodes;
# 3x3 is the largest board that finishes in reasonable time.
MAX_EXHAUSTIVE_SIZE = 3

NO_MOVE = (-1, -1)


class MinimaxAgent:
    """Exhaustive minimax over a Board that is mutated in place.

    Scores are from player two's point of view: player two maximizes and
    player one minimizes. A win found `depth` plies below the root scores
    `N*N - depth`, so faster wins weigh more.
    """

    def __init__(self):
        self.n_visited = 0

    def get_action(self, env: TicTacToeEnv) -> Tuple[int, int]:
        return self.get_best_move(env.board, env.current_player is Mark.PLAYER_ONE)

    def get_best_move(self, board: Board, is_player_one_turn: bool) -> Tuple[int, int]:
        if board.size > MAX_EXHAUSTIVE_SIZE:
            logging.warning(
                "exhaustive search on a %dx%d board is not expected to finish",
                board.size, board.size)

        player = Mark.PLAYER_ONE if is_player_one_turn else Mark.PLAYER_TWO
        # player one prefers negative scores, so flip the sign to keep a single max
        sign = -1 if is_player_one_turn else 1

        self.n_visited = 0
        best_score = float('-inf')
        best_move = NO_MOVE

        for x, y in board.empty_fields():
            board.set_for_player(player, x, y)
            score = sign * self.minimax(board, 0, not is_player_one_turn)
            board.clear(x, y)
            if score > best_score:
                best_score = score
                best_move = (x, y)

        logging.debug("best move for %s: %s (score %s, %d nodes)",
                      player.name, best_move, best_score, self.n_visited)
        return best_move

    def minimax(self, board: Board, depth: int, is_player_one_turn: bool) -> int:
        self.n_visited += 1

        if board.is_game_end():
            if is_player_one_turn:
                # player two made the last move
                return board.max_depth - depth
            return -(board.max_depth - depth)
        if board.is_full():
            return 0

        if is_player_one_turn:
            best_score = board.max_depth + 1
            for x, y in board.empty_fields():
                board.set_for_player(Mark.PLAYER_ONE, x, y)
                best_score = min(best_score, self.minimax(board, depth + 1, False))
                board.clear(x, y)
            return best_score
        else:
            best_score = -(board.max_depth + 1)
            for x, y in board.empty_fields():
                board.set_for_player(Mark.PLAYER_TWO, x, y)
                best_score = max(best_score, self.minimax(board, depth + 1, True))
                board.clear(x, y)
            return best_score


def get_best_move(board: Board, is_player_one_turn: bool) -> Tuple[int, int]:
    return MinimaxAgent().get_best_move(board, is_player_one_turn)


def minimax(board: Board, depth: int, is_player_one_turn: bool) -> int:
    return MinimaxAgent().minimax(board, depth, is_player_one_turn)
