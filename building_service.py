"""
Building actions: validate, charge, place, and score as one step.
"""

import logging

from catan_env import BoardState
from game_constants import SETTLEMENT_COST, ROAD_COST, CITY_COST, VP_PER_SETTLEMENT, VP_PER_CITY
from game_state import Player
from validators import SettlementValidator, RoadValidator

logger = logging.getLogger(__name__)


class BuildingService:
    """
    The only writer of board occupancy.

    Each build either completes fully (board updated, cost paid, VP awarded)
    or returns False having changed nothing.
    """

    def __init__(self, board: BoardState, settlement_validator: SettlementValidator,
                 road_validator: RoadValidator):
        self.board = board
        self.settlement_validator = settlement_validator
        self.road_validator = road_validator

    def build_settlement(self, player: Player, node_id: int, is_setup: bool = False) -> bool:
        if not self.settlement_validator.is_valid(player.player_id, node_id, is_setup):
            return False

        # Setup placements are free
        if not is_setup and not player.pay_cost(SETTLEMENT_COST):
            return False

        self.board.place_settlement(player.player_id, node_id)
        player.add_victory_points(VP_PER_SETTLEMENT)
        logger.debug("%s built a settlement at node %d", player, node_id)
        return True

    def build_road(self, player: Player, edge_id: int, is_setup: bool = False) -> bool:
        edge = self.board.get_edge(edge_id)
        if edge is None or edge.has_road:
            return False

        if not is_setup:
            if not self.road_validator.is_valid(player.player_id, edge_id):
                return False
            if not player.pay_cost(ROAD_COST):
                return False

        self.board.place_road(player.player_id, edge_id)
        logger.debug("%s built a road at edge %d", player, edge_id)
        return True

    def build_city(self, player: Player, node_id: int) -> bool:
        if not self.settlement_validator.can_upgrade_to_city(player.player_id, node_id):
            return False
        if not player.pay_cost(CITY_COST):
            return False

        self.board.upgrade_to_city(player.player_id, node_id)
        # The settlement already scored its point
        player.add_victory_points(VP_PER_CITY - VP_PER_SETTLEMENT)
        logger.debug("%s upgraded node %d to a city", player, node_id)
        return True
