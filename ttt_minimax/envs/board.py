import numpy as np
from enum import IntEnum
from typing import Iterator, Tuple


def position_to_idx(position, size=3):
    """(x, y) -> 1-based linear id"""
    x, y = position
    return x * size + y + 1


def idx_to_position(idx, size=3):
    return (idx - 1) // size, (idx - 1) % size


class Mark(IntEnum):
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.PLAYER_TWO if self is Mark.PLAYER_ONE else Mark.PLAYER_ONE


class Board(object):
    """N x N board, cells addressed as grid[x][y].

    x is the column and y is the row when rendered. `n_occupied` is kept in
    step with every set/clear so that `is_full` never rescans the grid; the
    caller owns the undo discipline.
    """
    chess = {
        Mark.EMPTY: "_",
        Mark.PLAYER_ONE: "X",
        Mark.PLAYER_TWO: "O",
    }

    def __init__(self, size=3):
        if size < 1:
            raise ValueError("board size must be at least 1, got {}".format(size))
        self.size = size
        self.max_depth = size * size
        self.grid = [[Mark.EMPTY for _ in range(size)] for _ in range(size)]
        self.n_occupied = 0

    def __repr__(self):
        return f"Board(size={self.size}, n_occupied={self.n_occupied})"

    def get_field(self, x, y) -> Mark:
        assert 0 <= x < self.size and 0 <= y < self.size, (x, y)
        return self.grid[x][y]

    def is_field_empty(self, x, y) -> bool:
        assert 0 <= x < self.size and 0 <= y < self.size, (x, y)
        return self.grid[x][y] is Mark.EMPTY

    def is_full(self) -> bool:
        return self.n_occupied >= self.max_depth

    def set_for_player(self, player: Mark, x, y):
        assert 0 <= x < self.size and 0 <= y < self.size, (x, y)
        self.grid[x][y] = player
        self.n_occupied += 1

    def set_for_player_by_id(self, player: Mark, idx):
        """idx is 1-based and row-major over (x, y)"""
        self.set_for_player(player, *idx_to_position(idx, self.size))

    def clear(self, x, y):
        assert 0 <= x < self.size and 0 <= y < self.size, (x, y)
        self.grid[x][y] = Mark.EMPTY
        self.n_occupied -= 1

    def is_win_in_column(self) -> bool:
        for column in self.grid:
            first = column[0]
            if first is not Mark.EMPTY and all(cell is first for cell in column):
                return True
        return False

    def is_win_in_row(self) -> bool:
        grid = self.grid
        for y in range(self.size):
            first = grid[0][y]
            if first is not Mark.EMPTY and all(grid[x][y] is first for x in range(1, self.size)):
                return True
        return False

    def is_win_in_diagonal(self) -> bool:
        grid = self.grid
        n = self.size

        first = grid[0][0]
        if first is not Mark.EMPTY and all(grid[i][i] is first for i in range(1, n)):
            return True

        first = grid[0][n - 1]
        if first is not Mark.EMPTY and all(grid[i][n - 1 - i] is first for i in range(1, n)):
            return True

        return False

    def is_game_end(self) -> bool:
        return self.is_win_in_column() or self.is_win_in_row() or self.is_win_in_diagonal()

    def empty_fields(self) -> Iterator[Tuple[int, int]]:
        """row-major, x outer"""
        for x in range(self.size):
            for y in range(self.size):
                if self.grid[x][y] is Mark.EMPTY:
                    yield x, y

    def to_array(self) -> np.ndarray:
        return np.array(self.grid, dtype=np.int8)

    def render(self) -> str:
        lines = []
        for y in range(self.size):
            line = "".join(f" | {self.chess[self.grid[x][y]]}" for x in range(self.size))
            lines.append(line + " | ")
        return "\n".join(lines)
