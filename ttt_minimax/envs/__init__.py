from .board import Board, Mark, position_to_idx, idx_to_position
from .tictactoe import TicTacToeEnv, InvalidMoveError
