"""Tests for settlement, city and road placement rules."""

import numpy as np
import pytest

from validators import SettlementValidator, RoadValidator


@pytest.fixture
def settlements(board):
    return SettlementValidator(board)


@pytest.fixture
def roads(board):
    return RoadValidator(board)


# ---------------------------------------------------------------------------
# Settlements
# ---------------------------------------------------------------------------


def test_every_node_is_open_during_setup_on_empty_board(settlements):
    assert settlements.valid_locations(1, is_setup=True) == list(range(54))


def test_no_node_is_open_outside_setup_without_roads(settlements):
    assert settlements.valid_locations(1) == []


def test_occupied_node_is_invalid(board, settlements):
    board.place_settlement(1, 13)
    assert not settlements.is_valid(1, 13, True)
    assert not settlements.is_valid(2, 13, True)


@pytest.mark.parametrize("is_setup", [True, False])
@pytest.mark.parametrize("player_id", [1, 2])
def test_distance_rule_blocks_neighbours(board, settlements, player_id, is_setup):
    board.place_settlement(1, 13)
    for edge_id in board.topology.get_adjacent_edges(13):
        board.place_road(player_id, edge_id)
    for node_id in board.topology.get_adjacent_nodes(13):
        assert not settlements.is_valid(player_id, node_id, is_setup)


def test_connected_nodes_are_valid_outside_setup(board, settlements, topology):
    board.place_road(1, topology.edge_between(13, 18))
    board.place_road(1, topology.edge_between(18, 23))
    assert settlements.valid_locations(1) == [13, 18, 23]
    assert settlements.valid_locations(2) == []


def test_unknown_node_is_invalid(settlements):
    assert not settlements.is_valid(1, 54, True)
    assert not settlements.is_valid(1, -1, True)


def test_numpy_and_float_ids_follow_the_distance_rule(board, settlements):
    board.place_settlement(1, 18)
    assert not settlements.is_valid(2, np.int64(13), True)
    assert not settlements.is_valid(2, 13.0, True)
    assert settlements.is_valid(2, np.int64(30), True)
    assert not settlements.is_valid(2, 30.0, True)


def test_city_upgrade_requires_own_settlement(board, settlements):
    board.place_settlement(1, 13)
    board.place_settlement(2, 30)
    assert settlements.can_upgrade_to_city(1, 13)
    assert not settlements.can_upgrade_to_city(2, 13)
    assert not settlements.can_upgrade_to_city(1, 30)
    assert not settlements.can_upgrade_to_city(1, 0)
    assert not settlements.can_upgrade_to_city(1, 99)
    assert settlements.valid_city_locations(1) == [13]

    board.upgrade_to_city(1, 13)
    assert not settlements.can_upgrade_to_city(1, 13)


# ---------------------------------------------------------------------------
# Roads
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("player_id", [1, 2, 3, 4])
def test_no_road_is_valid_on_empty_board(roads, player_id):
    assert roads.valid_locations(player_id) == []


def test_roads_next_to_own_settlement_are_valid(board, roads, topology):
    board.place_settlement(1, 13)
    assert roads.valid_locations(1) == list(topology.get_adjacent_edges(13))
    assert roads.valid_locations(2) == []


def test_road_extends_from_existing_road(board, roads, topology):
    first = topology.edge_between(13, 18)
    board.place_road(1, first)
    expected = sorted((set(topology.get_adjacent_edges(13)) | set(topology.get_adjacent_edges(18))) - {first})
    assert roads.valid_locations(1) == expected


def test_occupied_or_unknown_edge_is_invalid(board, roads, topology):
    board.place_settlement(1, 13)
    edge_id = topology.edge_between(13, 18)
    board.place_road(2, edge_id)
    assert not roads.is_valid(1, edge_id)
    assert not roads.is_valid(1, 72)
    assert not roads.is_valid(1, -5)


def test_opponent_building_does_not_cut_road_network(board, roads, topology):
    board.place_settlement(1, 13)
    board.place_road(1, topology.edge_between(13, 18))
    board.place_road(1, topology.edge_between(18, 23))
    board.place_settlement(2, 23)

    assert roads.is_valid(1, topology.edge_between(23, 29))
    assert roads.is_valid(1, topology.edge_between(23, 17))
