"""Random agent that selects actions uniformly at random."""

import random
from typing import List, Optional

from actions import (
    Action, ActionType, build_city_action, build_road_action, build_settlement_action,
)
from agents.base_agent import BaseAgent
from game_constants import SETTLEMENT_COST, CITY_COST, ROAD_COST, MAX_RESOURCES_BEFORE_DISCARD
from game_engine import CatanEngine
from game_state import Player


class RandomAgent(BaseAgent):
    """Agent that keeps picking random legal, affordable builds until none are left."""

    def __init__(self, player: Player, seed: Optional[int] = None, name: Optional[str] = None):
        """
        Initialize random agent.

        Args:
            player: Player ledger
            seed: Seed for the agent's own generator; None draws from the OS
            name: Optional name, defaults to "Random Agent {player_id}"
        """
        if name is None:
            name = f"Random Agent {player.player_id}"
        super().__init__(player, name)
        self.random = random.Random(seed)

    def legal_actions(self, controller: CatanEngine) -> List[Action]:
        """Every build the player may make and can pay for right now."""
        actions = []
        player_id = self.player_id

        if self.player.has_resources(SETTLEMENT_COST):
            for node_id in controller.get_valid_settlement_locations(player_id):
                actions.append(build_settlement_action(node_id))

        if self.player.has_resources(CITY_COST):
            for node_id in controller.get_valid_city_locations(player_id):
                actions.append(build_city_action(node_id))

        if self.player.has_resources(ROAD_COST):
            for edge_id in controller.get_valid_road_locations(player_id):
                actions.append(build_road_action(edge_id))

        return actions

    def take_turn(self, controller: CatanEngine) -> List[Action]:
        taken = []
        while True:
            legal_actions = self.legal_actions(controller)
            if not legal_actions:
                break

            action = self.random.choice(legal_actions)
            if not self._execute(controller, action):
                break
            taken.append(action)
        return taken

    def _execute(self, controller: CatanEngine, action: Action) -> bool:
        if action.action_type == ActionType.BUILD_SETTLEMENT:
            return controller.request_build_settlement(self.player_id, action.location)
        elif action.action_type == ActionType.BUILD_CITY:
            return controller.request_build_city(self.player_id, action.location)
        return controller.request_build_road(self.player_id, action.location)

    def handle_over_seven_cards(self, threshold: int = MAX_RESOURCES_BEFORE_DISCARD) -> int:
        """Discard half the hand, rounded down, picking cards at random."""
        total = self.player.total_resource_count()
        if total <= threshold:
            return 0

        hand = []
        for resource, count in self.player.resources.items():
            hand.extend([resource] * count)

        to_discard = total // 2
        for resource in self.random.sample(hand, to_discard):
            self.player.remove_resource(resource, 1)
        return to_discard

    def choose_setup_settlement(self, options: List[int]) -> int:
        return self.random.choice(options)

    def choose_setup_road(self, options: List[int]) -> int:
        return self.random.choice(options)
