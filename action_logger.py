import logging
from typing import Iterable, Optional

from game_state import Player

ACTION_LOGGER_NAME = "catan.actions"


class ActionLogger:
    """Writes game events as "<round> / Player <id>: <action>" lines."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger if logger is not None else logging.getLogger(ACTION_LOGGER_NAME)

    def log_action(self, round_number: int, player_id: int, action: str):
        self.logger.info("%d / Player %d: %s", round_number, player_id, action)

    def log_round_summary(self, round_number: int, players: Iterable[Player]):
        summary = ", ".join(f"Player {p.player_id}={p.victory_points}VP" for p in players)
        self.logger.info("%d / VP Summary: %s", round_number, summary)
