"""
Placement rules for settlements, cities and roads.
"""

from typing import List

from catan_env import BoardState


class SettlementValidator:
    """Distance rule plus road connectivity outside of setup."""

    def __init__(self, board: BoardState):
        self.board = board
        self.topology = board.topology

    def is_valid(self, player_id: int, node_id: int, is_setup: bool = False) -> bool:
        node = self.board.get_node(node_id)
        if node is None or node.is_occupied:
            return False

        # Distance rule: applies to every owner
        for adj_node_id in self.topology.get_adjacent_nodes(node_id):
            if self.board.nodes[adj_node_id].is_occupied:
                return False

        if is_setup:
            return True

        for edge_id in self.topology.get_adjacent_edges(node_id):
            if self.board.edges[edge_id].owner == player_id:
                return True
        return False

    def valid_locations(self, player_id: int, is_setup: bool = False) -> List[int]:
        """All node ids passing `is_valid`, ascending."""
        return [node_id for node_id in range(self.topology.num_nodes)
                if self.is_valid(player_id, node_id, is_setup)]

    def can_upgrade_to_city(self, player_id: int, node_id: int) -> bool:
        """A city replaces one of the player's own settlements in place."""
        node = self.board.get_node(node_id)
        return node is not None and node.has_settlement_by(player_id)

    def valid_city_locations(self, player_id: int) -> List[int]:
        return [node_id for node_id in range(self.topology.num_nodes)
                if self.can_upgrade_to_city(player_id, node_id)]


class RoadValidator:
    """
    A road must touch the player's network at one of its endpoints.

    An endpoint counts if the player has a building there, or if another
    edge at that node already carries one of the player's roads. An
    opponent's building on the junction does not cut the road network.
    """

    def __init__(self, board: BoardState):
        self.board = board
        self.topology = board.topology

    def is_valid(self, player_id: int, edge_id: int) -> bool:
        edge = self.board.get_edge(edge_id)
        if edge is None or edge.has_road:
            return False
        return self._connects_to_network(player_id, edge_id)

    def _connects_to_network(self, player_id: int, edge_id: int) -> bool:
        for node_id in self.topology.get_edge_endpoints(edge_id):
            if self.board.nodes[node_id].is_occupied_by(player_id):
                return True
            for adj_edge_id in self.topology.get_adjacent_edges(node_id):
                if adj_edge_id != edge_id and self.board.edges[adj_edge_id].owner == player_id:
                    return True
        return False

    def valid_locations(self, player_id: int) -> List[int]:
        """All edge ids passing `is_valid`, ascending."""
        return [edge_id for edge_id in range(self.topology.num_edges)
                if self.is_valid(player_id, edge_id)]
