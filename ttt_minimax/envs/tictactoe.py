import logging

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, Mark, idx_to_position


class InvalidMoveError(ValueError):
    pass


class TicTacToeEnv(gym.Env):
    """One game on a single Board, player one moves first.

    Moves from outside the engine (humans, scripts) are validated here and
    nowhere else.
    """

    def __init__(self, board_size=3):
        super().__init__()
        self.size = board_size
        self.board = Board(board_size)
        self.current_player = Mark.PLAYER_ONE
        self.last_move = (-1, -1)
        self.moves = []
        self.action_space = spaces.MultiDiscrete([self.size, self.size])
        self.observation_space = spaces.Box(low=0, high=2, shape=(self.size, self.size), dtype=np.int8)

    def reset(
            self,
            *,
            seed: int | None = None,
            options=None,
    ):
        super().reset(seed=seed)
        self.board = Board(self.size)
        self.current_player = Mark.PLAYER_ONE
        self.last_move = (-1, -1)
        self.moves = []
        return self.board.to_array(), {}

    def to_position(self, action):
        """(x, y) pairs pass through; a bare int is a 1-based linear id"""
        if isinstance(action, (int, np.integer)):
            action = int(action)
            if not 1 <= action <= self.board.max_depth:
                raise InvalidMoveError(f"invalid position: {action}")
            return idx_to_position(action, self.size)
        x, y = (int(v) for v in action)
        return x, y

    def is_valid_move(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size and self.board.is_field_empty(x, y)

    def step(self, action):
        x, y = self.to_position(action)
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise InvalidMoveError(f"invalid position: {(x, y)}")
        if not self.board.is_field_empty(x, y):
            raise InvalidMoveError(f"field {(x, y)} is already taken")
        if self.is_game_over():
            raise InvalidMoveError("game is already over")

        self.board.set_for_player(self.current_player, x, y)
        self.last_move = (x, y)
        self.moves.append((x, y))

        reward = 0
        if self.board.is_game_end():
            reward = 1
        elif not self.board.is_full():
            self.current_player = self.current_player.opponent()
        return self.board.to_array(), reward, self.is_game_over(), False, {"player": self.current_player}

    def is_game_over(self):
        return self.board.is_game_end() or self.board.is_full()

    def terminated(self):
        """(is over, winner); winner is Mark.EMPTY on a draw"""
        if self.board.is_game_end():
            return True, self.current_player
        elif self.board.is_full():
            return True, Mark.EMPTY
        return False, Mark.EMPTY

    def render(self):
        last_line = f"last position: {self.last_move}, player: {self.current_player.name}"
        output = self.board.render() + "\n" + last_line
        logging.debug(output)
        print(output)
        return output
