import logging
import random
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from board_topology import BoardTopology, as_id
from game_constants import (
    BuildingType, Resource, TileType,
    TERRAIN_DISTRIBUTION, NUMBER_TOKENS, NO_TOKEN,
)

logger = logging.getLogger(__name__)


@dataclass
class Tile:
    id: int
    terrain: TileType
    token: int = NO_TOKEN

    @property
    def resource(self) -> Optional[Resource]:
        return self.terrain.to_resource()

    @property
    def has_number_token(self) -> bool:
        return self.token != NO_TOKEN


@dataclass
class Node:
    id: int
    owner: Optional[int] = None
    building: BuildingType = BuildingType.NONE

    @property
    def is_occupied(self) -> bool:
        return self.owner is not None

    def is_occupied_by(self, player_id: int) -> bool:
        return self.owner is not None and self.owner == player_id

    def has_settlement_by(self, player_id: int) -> bool:
        return self.is_occupied_by(player_id) and self.building == BuildingType.SETTLEMENT


@dataclass
class Edge:
    id: int
    owner: Optional[int] = None

    @property
    def has_road(self) -> bool:
        return self.owner is not None


class BoardState:
    """
    Mutable occupancy of the board plus the tile layout.

    The topology is shared and read-only; nodes and edges here are written
    only through BuildingService.
    """

    def __init__(self, topology: BoardTopology, tiles: List[Tile], seed: Optional[int] = None):
        if len(tiles) != topology.num_tiles:
            raise ValueError(f"Expected {topology.num_tiles} tiles, got {len(tiles)}")
        self.topology = topology
        self.seed = seed
        self.tiles = tiles
        self.nodes: Dict[int, Node] = {i: Node(i) for i in range(topology.num_nodes)}
        self.edges: Dict[int, Edge] = {i: Edge(i) for i in range(topology.num_edges)}

    def get_node(self, node_id: int) -> Optional[Node]:
        node_id = as_id(node_id)
        return None if node_id is None else self.nodes.get(node_id)

    def get_edge(self, edge_id: int) -> Optional[Edge]:
        edge_id = as_id(edge_id)
        return None if edge_id is None else self.edges.get(edge_id)

    def get_tile(self, tile_id: int) -> Optional[Tile]:
        tile_id = as_id(tile_id)
        if tile_id is None or not 0 <= tile_id < len(self.tiles):
            return None
        return self.tiles[tile_id]

    def tiles_with_number(self, number: int) -> List[Tile]:
        """Tiles carrying the given number token, in id order."""
        return [tile for tile in self.tiles if tile.has_number_token and tile.token == number]

    def place_settlement(self, player_id: int, node_id: int):
        node = self.nodes[node_id]
        node.owner = player_id
        node.building = BuildingType.SETTLEMENT

    def upgrade_to_city(self, player_id: int, node_id: int):
        node = self.nodes[node_id]
        node.owner = player_id
        node.building = BuildingType.CITY

    def place_road(self, player_id: int, edge_id: int):
        self.edges[edge_id].owner = player_id

    def settlements_of(self, player_id: int) -> List[int]:
        return [n.id for n in self.nodes.values()
                if n.is_occupied_by(player_id) and n.building == BuildingType.SETTLEMENT]

    def cities_of(self, player_id: int) -> List[int]:
        return [n.id for n in self.nodes.values()
                if n.is_occupied_by(player_id) and n.building == BuildingType.CITY]

    def roads_of(self, player_id: int) -> List[int]:
        return [e.id for e in self.edges.values() if e.owner == player_id]

    @property
    def desert_tile_id(self) -> Optional[int]:
        for tile in self.tiles:
            if tile.terrain == TileType.DESERT:
                return tile.id
        return None


def _resolve_seed(seed: Optional[int]) -> int:
    if seed is None:
        return int(time.time() * 1000)
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"Board seed must be an integer, got {seed!r}")
    return seed


def generate_random_board(seed: Optional[int] = None,
                          topology: Optional[BoardTopology] = None) -> BoardState:
    """
    Build a board with shuffled terrain and number tokens.

    One generator drives both shuffles, terrain first, so a given seed always
    yields the same layout. Tokens go to non-desert tiles in id order.
    """
    seed = _resolve_seed(seed)
    if topology is None:
        topology = BoardTopology()
    rng = random.Random(seed)

    terrains = []
    for terrain, count in TERRAIN_DISTRIBUTION.items():
        terrains.extend([terrain] * count)
    rng.shuffle(terrains)

    tokens = NUMBER_TOKENS.copy()
    rng.shuffle(tokens)

    tiles = []
    token_idx = 0
    for tile_id, terrain in enumerate(terrains):
        if terrain == TileType.DESERT:
            token = NO_TOKEN
        else:
            token = tokens[token_idx]
            token_idx += 1
        tiles.append(Tile(id=tile_id, terrain=terrain, token=token))

    logger.debug("Generated board with seed %d", seed)
    return BoardState(topology, tiles, seed=seed)
