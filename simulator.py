"""
Runs a full game between random agents.

Setup uses snake draft order (1-2-3-4-4-3-2-1). The game ends when a player
reaches the victory point target or the round limit is hit.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from action_logger import ActionLogger
from agents import BaseAgent, RandomAgent
from catan_env import generate_random_board
from config_parser import SimulationConfig
from dice import StandardDice
from game_constants import ROBBER_ROLL
from game_engine import CatanEngine
from game_state import Player

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    winner_id: Optional[int]
    rounds: int
    scores: Dict[int, int] = field(default_factory=dict)


class Simulator:
    """Owns the board, the engine and the agents for one game."""

    def __init__(self, config: Optional[SimulationConfig] = None,
                 action_logger: Optional[ActionLogger] = None):
        self.config = config if config else SimulationConfig()
        self.seed = self.config.random_seed
        if self.seed is None:
            self.seed = int(time.time() * 1000)

        board = generate_random_board(self.seed)
        self.engine = CatanEngine(board, StandardDice(self.seed))
        self.action_logger = action_logger if action_logger else ActionLogger()

        self.players: List[Player] = [
            Player(player_id=i + 1) for i in range(self.config.num_players)
        ]
        self.agents: List[BaseAgent] = [
            RandomAgent(player, seed=self.seed + i) for i, player in enumerate(self.players)
        ]
        self.engine.set_players(self.players)

        self.current_round = 0
        self.winner: Optional[Player] = None

    @property
    def board(self):
        return self.engine.board

    def initial_setup(self):
        """Snake draft: each player places a settlement and road, forward then back."""
        self.action_logger.log_action(0, 0, "Setup phase - snake draft order")

        for agent in self.agents:
            self._place_setup_pair(agent, grant_resources=False)

        for agent in reversed(self.agents):
            self._place_setup_pair(agent, grant_resources=True)

    def _place_setup_pair(self, agent: BaseAgent, grant_resources: bool):
        player_id = agent.player_id
        options = self.engine.get_valid_settlement_locations(player_id, is_setup=True)
        if not options:
            logger.warning("No legal setup settlement left for player %d", player_id)
            return

        node_id = agent.choose_setup_settlement(options)
        if not self.engine.request_build_settlement(player_id, node_id, is_setup=True):
            logger.warning("Player %d could not settle node %d during setup", player_id, node_id)
            return
        self.action_logger.log_action(0, player_id, f"Placed settlement at node {node_id}")

        topology = self.board.topology
        road_options = [edge_id for edge_id in topology.get_adjacent_edges(node_id)
                        if not self.board.edges[edge_id].has_road]
        if road_options:
            edge_id = agent.choose_setup_road(road_options)
            if self.engine.request_build_road(player_id, edge_id, is_setup=True):
                self.action_logger.log_action(0, player_id, f"Placed road at edge {edge_id}")

        if grant_resources:
            self._give_starting_resources(agent.player, node_id)

    def _give_starting_resources(self, player: Player, node_id: int):
        """One card per producing tile around the second settlement."""
        for tile_id in self.board.topology.tiles_for_node(node_id):
            resource = self.board.get_tile(tile_id).resource
            if resource is not None:
                player.add_resource(resource, 1)

    def play_round(self):
        self.current_round += 1

        for agent in self.agents:
            player = agent.player
            roll = self.engine.roll_dice()
            self.action_logger.log_action(self.current_round, player.player_id, f"Rolled {roll}")

            if roll == ROBBER_ROLL:
                self.action_logger.log_action(
                    self.current_round, player.player_id,
                    "Robber activated (rolled 7) - no resources distributed")
                self._handle_robber()
            else:
                self.engine.distribute_resources(roll)

            for action in agent.take_turn(self.engine):
                self.action_logger.log_action(self.current_round, player.player_id, str(action))

            if player.victory_points >= self.config.victory_points_to_win:
                self.winner = player
                break

        self.action_logger.log_round_summary(self.current_round, self.players)

    def _handle_robber(self):
        for agent in self.agents:
            discarded = agent.handle_over_seven_cards(self.config.discard_threshold)
            if discarded:
                self.action_logger.log_action(
                    self.current_round, agent.player_id, f"Discarded {discarded} cards")

    def run(self) -> SimulationResult:
        """Play setup and then rounds until someone wins or the limit is reached."""
        self.initial_setup()

        while self.current_round < self.config.max_rounds and self.winner is None:
            self.play_round()

        result = SimulationResult(
            winner_id=self.winner.player_id if self.winner else None,
            rounds=self.current_round,
            scores={p.player_id: p.victory_points for p in self.players},
        )
        self._log_final_scores(result)
        return result

    def _log_final_scores(self, result: SimulationResult):
        if self.winner is not None:
            logger.info("GAME OVER: Player %d wins with %d VP after %d rounds",
                        self.winner.player_id, self.winner.victory_points, result.rounds)
        else:
            logger.info("Game ended after %d rounds (no winner)", result.rounds)

        for player in self.players:
            logger.info("  Player %d: %d VP, %d resources",
                        player.player_id, player.victory_points, player.total_resource_count())
