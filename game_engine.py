"""
Game controller that agents talk to.
Wires the board, validators, distributor and building service together.
"""

from typing import Dict, List, Optional

from building_service import BuildingService
from catan_env import BoardState
from dice import StandardDice
from game_constants import Resource
from game_state import Player
from resource_distributor import ResourceDistributor
from validators import SettlementValidator, RoadValidator


class CatanEngine:
    """Query legal placements and request builds on behalf of players."""

    def __init__(self, board: BoardState, dice: Optional[StandardDice] = None):
        self.board = board
        self.dice = dice if dice else StandardDice()
        self.players: List[Player] = []

        self.settlement_validator = SettlementValidator(board)
        self.road_validator = RoadValidator(board)
        self.resource_distributor = ResourceDistributor(board)
        self.building_service = BuildingService(
            board, self.settlement_validator, self.road_validator
        )

    def set_players(self, players: List[Player]):
        self.players = list(players)

    def get_player(self, player_id: int) -> Optional[Player]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def roll_dice(self) -> int:
        return self.dice.roll()

    def distribute_resources(self, dice_roll: int) -> Dict[int, Dict[Resource, int]]:
        return self.resource_distributor.distribute(dice_roll, self.players)

    def get_valid_settlement_locations(self, player_id: int, is_setup: bool = False) -> List[int]:
        return self.settlement_validator.valid_locations(player_id, is_setup)

    def get_valid_road_locations(self, player_id: int) -> List[int]:
        return self.road_validator.valid_locations(player_id)

    def get_valid_city_locations(self, player_id: int) -> List[int]:
        return self.settlement_validator.valid_city_locations(player_id)

    def request_build_settlement(self, player_id: int, node_id: int, is_setup: bool = False) -> bool:
        player = self.get_player(player_id)
        if player is None:
            return False
        return self.building_service.build_settlement(player, node_id, is_setup)

    def request_build_road(self, player_id: int, edge_id: int, is_setup: bool = False) -> bool:
        player = self.get_player(player_id)
        if player is None:
            return False
        return self.building_service.build_road(player, edge_id, is_setup)

    def request_build_city(self, player_id: int, node_id: int) -> bool:
        player = self.get_player(player_id)
        if player is None:
            return False
        return self.building_service.build_city(player, node_id)
