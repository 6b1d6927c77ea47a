from typing import Optional, Tuple, TypedDict


class GameArgs(TypedDict):
    board_size: int
    human_player: int
    first_move: Optional[Tuple[int, int]]
    render: bool
    sweep: bool
    force: bool


def default_args():
    game_args: GameArgs = {
        "board_size": 3,
        "human_player": 0,  # 0: engine plays both sides
        "first_move": None,
        "render": True,
        "sweep": False,
        "force": False,
    }
    return game_args
