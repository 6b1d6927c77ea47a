import logging
from collections import Counter
from typing import Optional, Tuple, Union

import tqdm

from .envs import TicTacToeEnv, Mark
from .agents import MinimaxAgent, HumanAgent


def start_play(
    env: TicTacToeEnv,
    player_1: Union[MinimaxAgent, HumanAgent],
    player_2: Union[MinimaxAgent, HumanAgent],
    render=False,
    first_move: Optional[Tuple[int, int]] = None,
) -> Mark:
    """play one game to the end and return the winner (Mark.EMPTY on a tie)

    `first_move` is applied for player one before any agent is asked.
    """
    env.reset()
    if render:
        env.render()

    if first_move is not None:
        env.step(first_move)
        if render:
            env.render()

    while not env.is_game_over():
        if env.current_player is Mark.PLAYER_ONE:
            move = player_1.get_action(env)
        else:
            move = player_2.get_action(env)

        env.step(move)
        if render:
            env.render()

    _, winner = env.terminated()
    if winner is not Mark.EMPTY:
        logging.info("Game end. Winner is player: %s", winner.name)
    else:
        logging.info("Game end. Tie")
    return winner


def opening_sweep(env: TicTacToeEnv, agent: MinimaxAgent, progress=True) -> Counter:
    """engine self-play from every possible opening move of player one"""
    winners = Counter()
    openings = [(x, y) for x in range(env.size) for y in range(env.size)]
    for opening in tqdm.tqdm(openings, disable=not progress):
        winner = start_play(env, agent, agent, first_move=opening)
        winners[winner] += 1
    return winners
