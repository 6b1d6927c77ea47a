import argparse
import logging

from ttt_minimax.envs import TicTacToeEnv, Mark
from ttt_minimax.agents import MinimaxAgent, HumanAgent
from ttt_minimax.agents.minmax import MAX_EXHAUSTIVE_SIZE
from ttt_minimax.utils import start_play, opening_sweep
from ttt_minimax.script_utils import default_args


parser = argparse.ArgumentParser(description='Optimal N x N tic-tac-toe by exhaustive minimax')

parser.add_argument('--size', type=int, default=None, help='board dimension N')
parser.add_argument('--human', type=int, choices=[0, 1, 2], default=None,
                    help='which player the human controls, 0 for engine self-play')
parser.add_argument('--first-move', type=int, nargs=2, metavar=('X', 'Y'), default=None,
                    help="player one's opening move")
parser.add_argument('--sweep', action="store_true", help='engine self-play from every opening')
parser.add_argument('--no-render', action="store_true")
parser.add_argument('--force', action="store_true", help=f'allow boards larger than {MAX_EXHAUSTIVE_SIZE}')
parser.add_argument('--log-level', type=str, default="INFO")
args = parser.parse_args()

logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(message)s")

configs = default_args()
if args.size is not None:
    configs["board_size"] = args.size
if args.human is not None:
    configs["human_player"] = args.human
if args.first_move is not None:
    configs["first_move"] = tuple(args.first_move)
configs["render"] = not args.no_render
configs["sweep"] = args.sweep
configs["force"] = args.force

if configs["board_size"] > MAX_EXHAUSTIVE_SIZE and not configs["force"]:
    parser.error(f"boards larger than {MAX_EXHAUSTIVE_SIZE}x{MAX_EXHAUSTIVE_SIZE} "
                 "are not searchable exhaustively, pass --force to try anyway")

env = TicTacToeEnv(board_size=configs["board_size"])
engine = MinimaxAgent()

if configs["sweep"]:
    winners = opening_sweep(env, engine)
    for mark in Mark:
        print(f"{'tie' if mark is Mark.EMPTY else mark.name}: {winners[mark]}")
else:
    player_1 = HumanAgent(Mark.PLAYER_ONE) if configs["human_player"] == 1 else engine
    player_2 = HumanAgent(Mark.PLAYER_TWO) if configs["human_player"] == 2 else engine
    start_play(env, player_1, player_2, render=configs["render"], first_move=configs["first_move"])
    print("\nGame over")
