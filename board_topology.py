"""
Static topology of the standard Catan board.

19 hex tiles (IDs 0-18), 54 nodes (IDs 0-53) and 72 edges (IDs 0-71).
The only hand-written data is the tile -> corner table below; node adjacency
and edge ids are derived from it, so the three views can never disagree.

Tile rows (3-4-5-4-3):
    Row 1: T0  T1  T2
    Row 2: T3  T4  T5  T6
    Row 3: T7  T8  T9  T10 T11
    Row 4: T12 T13 T14 T15
    Row 5: T16 T17 T18

Each tile lists its 6 corner nodes clockwise from the top vertex.
"""

import logging
import operator
from typing import Dict, List, Optional, Tuple

import networkx as nx

from game_constants import NUM_EDGES, NUM_NODES, NUM_TILES

logger = logging.getLogger(__name__)


TILE_NODES: Dict[int, Tuple[int, ...]] = {
    # Top row
    0: (0, 4, 8, 12, 7, 3),
    1: (1, 5, 9, 13, 8, 4),
    2: (2, 6, 10, 14, 9, 5),
    # Second row
    3: (7, 12, 17, 22, 16, 11),
    4: (8, 13, 18, 23, 17, 12),
    5: (9, 14, 19, 24, 18, 13),
    6: (10, 15, 20, 25, 19, 14),
    # Centre row
    7: (16, 22, 28, 33, 27, 21),
    8: (17, 23, 29, 34, 28, 22),
    9: (18, 24, 30, 35, 29, 23),
    10: (19, 25, 31, 36, 30, 24),
    11: (20, 26, 32, 37, 31, 25),
    # Fourth row
    12: (28, 34, 39, 43, 38, 33),
    13: (29, 35, 40, 44, 39, 34),
    14: (30, 36, 41, 45, 40, 35),
    15: (31, 37, 42, 46, 41, 36),
    # Bottom row
    16: (39, 44, 48, 51, 47, 43),
    17: (40, 45, 49, 52, 48, 44),
    18: (41, 46, 50, 53, 49, 45),
}

# Tiles per row, top to bottom
ROW_SIZES = [3, 4, 5, 4, 3]


def as_id(value) -> Optional[int]:
    """Integer form of a board id (numpy ints included), or None for floats and other non-integers."""
    try:
        return operator.index(value)
    except TypeError:
        return None


class BoardTopology:
    """
    Immutable node/edge/tile adjacency for the board.

    Every query returns a tuple. Unknown ids give an empty tuple rather than
    raising, so callers can treat them as "nothing there".
    """

    def __init__(self, tile_nodes: Optional[Dict[int, Tuple[int, ...]]] = None,
                 num_nodes: int = NUM_NODES):
        if tile_nodes is None:
            tile_nodes = TILE_NODES
        self._tile_nodes: Dict[int, Tuple[int, ...]] = {
            tile_id: tuple(corners) for tile_id, corners in sorted(tile_nodes.items())
        }
        self.graph = nx.Graph()
        self._edge_endpoints: List[Tuple[int, int]] = []
        self._node_tiles: Dict[int, Tuple[int, ...]] = {}
        self._build_graph(num_nodes)
        self._verify(num_nodes)
        logger.debug("Built board topology: %d nodes, %d edges, %d tiles",
                     self.num_nodes, self.num_edges, self.num_tiles)

    def _build_graph(self, num_nodes: int):
        self.graph.add_nodes_from(range(num_nodes))

        # Two nodes are adjacent iff they are consecutive corners of some tile
        for corners in self._tile_nodes.values():
            for i in range(len(corners)):
                self.graph.add_edge(corners[i], corners[(i + 1) % len(corners)])

        # Number edges in first-seen order: nodes ascending, neighbours as introduced
        for node_id in range(num_nodes):
            for neighbor in self.graph.neighbors(node_id):
                data = self.graph.edges[node_id, neighbor]
                if 'id' not in data:
                    data['id'] = len(self._edge_endpoints)
                    self._edge_endpoints.append((node_id, neighbor))

        node_tiles: Dict[int, List[int]] = {node_id: [] for node_id in range(num_nodes)}
        for tile_id, corners in self._tile_nodes.items():
            for node_id in corners:
                node_tiles[node_id].append(tile_id)
        self._node_tiles = {node_id: tuple(tiles) for node_id, tiles in node_tiles.items()}

    def _verify(self, num_nodes: int):
        """Fail fast on a malformed tile table."""
        for tile_id, corners in self._tile_nodes.items():
            if len(corners) != 6 or len(set(corners)) != 6:
                raise ValueError(f"Tile {tile_id} must list 6 distinct corner nodes, got {corners}")
            for node_id in corners:
                if not 0 <= node_id < num_nodes:
                    raise ValueError(f"Tile {tile_id} references unknown node {node_id}")

        if self.graph.number_of_nodes() != num_nodes:
            raise ValueError(f"Expected {num_nodes} nodes, got {self.graph.number_of_nodes()}")

        if num_nodes == NUM_NODES:
            if self.num_edges != NUM_EDGES:
                raise ValueError(f"Expected {NUM_EDGES} edges, got {self.num_edges}")
            if self.num_tiles != NUM_TILES:
                raise ValueError(f"Expected {NUM_TILES} tiles, got {self.num_tiles}")

        isolated = [n for n in self.graph.nodes if self.graph.degree(n) == 0]
        if isolated:
            raise ValueError(f"Nodes not on any tile: {isolated}")

    @property
    def num_nodes(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def num_edges(self) -> int:
        return len(self._edge_endpoints)

    @property
    def num_tiles(self) -> int:
        return len(self._tile_nodes)

    def _node(self, node_id) -> Optional[int]:
        node_id = as_id(node_id)
        if node_id is None or node_id not in self.graph:
            return None
        return node_id

    def get_adjacent_nodes(self, node_id: int) -> Tuple[int, ...]:
        """Nodes sharing an edge with `node_id`, ascending."""
        node_id = self._node(node_id)
        if node_id is None:
            return ()
        return tuple(sorted(self.graph.neighbors(node_id)))

    def get_adjacent_edges(self, node_id: int) -> Tuple[int, ...]:
        """Edges incident to `node_id`, ascending."""
        node_id = self._node(node_id)
        if node_id is None:
            return ()
        return tuple(sorted(data['id'] for _, _, data in self.graph.edges(node_id, data=True)))

    def get_edge_endpoints(self, edge_id: int) -> Tuple[int, ...]:
        """The two nodes an edge connects."""
        edge_id = as_id(edge_id)
        if edge_id is None or not 0 <= edge_id < len(self._edge_endpoints):
            return ()
        return self._edge_endpoints[edge_id]

    def get_tile_nodes(self, tile_id: int) -> Tuple[int, ...]:
        """The 6 corners of a tile, clockwise from the top."""
        tile_id = as_id(tile_id)
        if tile_id is None:
            return ()
        return self._tile_nodes.get(tile_id, ())

    def tiles_for_node(self, node_id: int) -> Tuple[int, ...]:
        """Tiles that have `node_id` as a corner, ascending."""
        node_id = self._node(node_id)
        if node_id is None:
            return ()
        return self._node_tiles.get(node_id, ())

    def edge_between(self, node_a: int, node_b: int) -> Optional[int]:
        """Edge id joining two nodes, or None if they are not adjacent."""
        node_a, node_b = self._node(node_a), self._node(node_b)
        if node_a is None or node_b is None:
            return None
        if not self.graph.has_edge(node_a, node_b):
            return None
        return self.graph.edges[node_a, node_b]['id']

    @property
    def edges(self) -> Tuple[Tuple[int, int], ...]:
        """Endpoints of every edge, indexed by edge id."""
        return tuple(self._edge_endpoints)
