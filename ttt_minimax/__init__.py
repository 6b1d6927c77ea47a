from .envs import Board, Mark, TicTacToeEnv, InvalidMoveError
from .agents import MinimaxAgent, HumanAgent
from .utils import start_play, opening_sweep
