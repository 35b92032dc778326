"""
Game constants for Settlers of Catan.
Defines resources, terrain, building costs, board composition, and game rules.
"""

from enum import Enum
from typing import Dict, Optional


class Resource(Enum):
    """Resource types in Catan."""
    LUMBER = "lumber"
    BRICK = "brick"
    GRAIN = "grain"
    WOOL = "wool"
    ORE = "ore"


class TileType(Enum):
    """Terrain types for hex tiles. Every terrain except DESERT produces a resource."""
    WOOD = "wood"
    BRICK = "brick"
    WHEAT = "wheat"
    SHEEP = "sheep"
    ORE = "ore"
    DESERT = "desert"

    def to_resource(self) -> Optional[Resource]:
        """Resource produced by this terrain, or None for the desert."""
        return TERRAIN_RESOURCES.get(self)


class BuildingType(Enum):
    """Structures that can sit on a node."""
    NONE = "none"
    SETTLEMENT = "settlement"
    CITY = "city"


TERRAIN_RESOURCES = {
    TileType.WOOD: Resource.LUMBER,
    TileType.BRICK: Resource.BRICK,
    TileType.WHEAT: Resource.GRAIN,
    TileType.SHEEP: Resource.WOOL,
    TileType.ORE: Resource.ORE,
}


# Building costs (resource type -> count)
SETTLEMENT_COST = {
    Resource.LUMBER: 1,
    Resource.BRICK: 1,
    Resource.GRAIN: 1,
    Resource.WOOL: 1,
}

CITY_COST = {
    Resource.ORE: 3,
    Resource.GRAIN: 2,
}

ROAD_COST = {
    Resource.LUMBER: 1,
    Resource.BRICK: 1,
}

# Terrain bag for the standard board (19 tiles total)
TERRAIN_DISTRIBUTION = {
    TileType.WOOD: 4,
    TileType.BRICK: 3,
    TileType.SHEEP: 4,
    TileType.WHEAT: 4,
    TileType.ORE: 3,
    TileType.DESERT: 1,
}

# Number tokens (18 tokens, one per non-desert tile)
NUMBER_TOKENS = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]

# Token value carried by the desert
NO_TOKEN = 0

# Board dimensions
NUM_NODES = 54
NUM_EDGES = 72
NUM_TILES = 19

# Victory points
VP_PER_SETTLEMENT = 1
VP_PER_CITY = 2
VP_TO_WIN = 10

# Dice
ROBBER_ROLL = 7

# Must discard half if 7 is rolled and you have more than this
MAX_RESOURCES_BEFORE_DISCARD = 7

# Production per building on a rolled tile
SETTLEMENT_YIELD = 1
CITY_YIELD = 2


# Helper functions for resource management
def can_afford(resources: Dict[Resource, int], cost: Dict[Resource, int]) -> bool:
    """Check if player has enough resources to pay a cost."""
    for resource, amount in cost.items():
        if resources.get(resource, 0) < amount:
            return False
    return True


def deduct_resources(resources: Dict[Resource, int], cost: Dict[Resource, int]) -> None:
    """Deduct cost from resources (modifies in place)."""
    for resource, amount in cost.items():
        resources[resource] = resources.get(resource, 0) - amount


def total_resources(resources: Dict[Resource, int]) -> int:
    """Count total number of resource cards."""
    return sum(resources.values())
