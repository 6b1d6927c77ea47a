from .minmax import MinimaxAgent, get_best_move, minimax
from .human import HumanAgent
