import logging
from typing import Dict, Iterable

from catan_env import BoardState
from game_constants import BuildingType, Resource, ROBBER_ROLL, SETTLEMENT_YIELD, CITY_YIELD
from game_state import Player

logger = logging.getLogger(__name__)


class ResourceDistributor:
    """Pays out production for a dice roll."""

    def __init__(self, board: BoardState):
        self.board = board
        self.topology = board.topology

    def distribute(self, dice_roll: int, players: Iterable[Player]) -> Dict[int, Dict[Resource, int]]:
        """
        Credit every building on a tile whose token matches the roll.

        Settlements earn 1 of the tile's resource and cities earn 2. A 7 pays
        nothing. Tiles are visited in id order and corners in their fixed
        order. Returns the payout per player id.
        """
        payouts: Dict[int, Dict[Resource, int]] = {}
        if dice_roll == ROBBER_ROLL:
            return payouts

        players_by_id = {p.player_id: p for p in players}

        for tile in self.board.tiles_with_number(dice_roll):
            resource = tile.resource
            if resource is None:
                continue

            for node_id in self.topology.get_tile_nodes(tile.id):
                node = self.board.nodes[node_id]
                if not node.is_occupied:
                    continue
                owner = players_by_id.get(node.owner)
                if owner is None:
                    logger.warning("Node %d is owned by unknown player %s", node_id, node.owner)
                    continue

                amount = CITY_YIELD if node.building == BuildingType.CITY else SETTLEMENT_YIELD
                owner.add_resource(resource, amount)
                gained = payouts.setdefault(owner.player_id, {})
                gained[resource] = gained.get(resource, 0) + amount

        logger.debug("Roll %d produced %s", dice_roll, payouts)
        return payouts
