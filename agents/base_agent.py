"""
Base agent interface for Catan agents.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from actions import Action
from game_constants import MAX_RESOURCES_BEFORE_DISCARD
from game_engine import CatanEngine
from game_state import Player


class BaseAgent(ABC):
    """Abstract base class for all Catan agents.

    An agent decides what its player does; the engine only ever touches the
    player's ledger.
    """

    def __init__(self, player: Player, name: Optional[str] = None):
        """
        Initialize the agent.

        Args:
            player: The ledger this agent plays with
            name: Name of the agent, defaults to the player's name
        """
        self.player = player
        self.name = name if name is not None else player.name

    @property
    def player_id(self) -> int:
        return self.player.player_id

    @abstractmethod
    def take_turn(self, controller: CatanEngine) -> List[Action]:
        """
        Build as the agent sees fit after the dice have been rolled.

        Args:
            controller: Engine used to query legal locations and request builds

        Returns:
            The actions that were carried out, in order
        """

    @abstractmethod
    def handle_over_seven_cards(self, threshold: int = MAX_RESOURCES_BEFORE_DISCARD) -> int:
        """Discard after a 7 is rolled when holding more than `threshold` cards.

        Returns the number of cards discarded.
        """

    def choose_setup_settlement(self, options: List[int]) -> int:
        """Pick a node for a free setup settlement from `options`."""
        return options[0]

    def choose_setup_road(self, options: List[int]) -> int:
        """Pick an edge for the free road next to a setup settlement."""
        return options[0]

    def __str__(self) -> str:
        return f"{self.name} (Player {self.player_id})"

    def __repr__(self) -> str:
        return self.__str__()
