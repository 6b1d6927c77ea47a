import logging

from ..envs import TicTacToeEnv, idx_to_position


class HumanAgent:
    def __init__(self, player_id=None, prompt=None):
        self.player_id = player_id
        if prompt is None:
            prompt = f"{player_id.name}, your turn: " if player_id else "Your turn: "
        self.prompt = prompt

    def parse(self, text, size):
        """'x y' or a 1-based linear id; None if the text is not a move"""
        parts = text.split()
        try:
            values = [int(p) for p in parts]
        except ValueError:
            return None
        if len(values) == 2:
            x, y = values
        elif len(values) == 1 and 1 <= values[0] <= size * size:
            x, y = idx_to_position(values[0], size)
        else:
            return None
        if not (0 <= x < size and 0 <= y < size):
            return None
        return x, y

    def get_action(self, env: TicTacToeEnv):
        while True:
            move = self.parse(input(self.prompt), env.size)
            if move is not None and env.is_valid_move(*move):
                return move
            logging.info("not a valid free field, enter 'x y' or a number in 1..%d", env.size * env.size)
