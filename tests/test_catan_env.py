"""Tests for board generation and occupancy lookups."""

from collections import Counter

import numpy as np
import pytest

from catan_env import BoardState, Tile, generate_random_board
from game_constants import BuildingType, NUMBER_TOKENS, TileType


EXPECTED_TERRAIN = Counter({
    TileType.WOOD: 4, TileType.BRICK: 3, TileType.SHEEP: 4,
    TileType.WHEAT: 4, TileType.ORE: 3, TileType.DESERT: 1,
})


def test_board_starts_empty(board):
    assert len(board.nodes) == 54
    assert len(board.edges) == 72
    assert len(board.tiles) == 19
    assert not any(n.is_occupied for n in board.nodes.values())
    assert not any(e.has_road for e in board.edges.values())


@pytest.mark.parametrize("seed", [0, 1, 42, 12345, 2 ** 40])
def test_tile_bags_are_preserved(topology, seed):
    board = generate_random_board(seed, topology)
    assert Counter(t.terrain for t in board.tiles) == EXPECTED_TERRAIN
    tokens = sorted(t.token for t in board.tiles if t.terrain != TileType.DESERT)
    assert tokens == sorted(NUMBER_TOKENS)

    desert = board.get_tile(board.desert_tile_id)
    assert desert.token == 0
    assert not desert.has_number_token
    assert desert.resource is None


def test_same_seed_same_layout(topology):
    a = generate_random_board(7, topology)
    b = generate_random_board(7, topology)
    assert a.tiles == b.tiles
    assert a.seed == 7


def test_different_seeds_usually_differ(topology):
    layouts = {tuple((t.terrain, t.token) for t in generate_random_board(s, topology).tiles)
               for s in range(5)}
    assert len(layouts) > 1


def test_missing_seed_is_time_derived(topology):
    board = generate_random_board(topology=topology)
    assert isinstance(board.seed, int)


@pytest.mark.parametrize("seed", ["42", 4.2, True])
def test_non_integer_seed_is_rejected(topology, seed):
    with pytest.raises(TypeError):
        generate_random_board(seed, topology)


def test_wrong_tile_count_is_rejected(topology):
    with pytest.raises(ValueError):
        BoardState(topology, [Tile(0, TileType.DESERT)])


def test_tiles_with_number(board):
    for number in (2, 3, 4, 5, 6, 8, 9, 10, 11, 12):
        tiles = board.tiles_with_number(number)
        assert len(tiles) == (1 if number in (2, 12) else 2)
        assert all(t.token == number for t in tiles)
        assert [t.id for t in tiles] == sorted(t.id for t in tiles)
    assert board.tiles_with_number(7) == []
    assert board.tiles_with_number(0) == []


def test_unknown_ids_return_none(board):
    assert board.get_node(54) is None
    assert board.get_edge(72) is None
    assert board.get_tile(19) is None
    assert board.get_tile(-1) is None


def test_lookups_accept_numpy_ints_and_refuse_floats(board):
    assert board.get_node(np.int64(13)) is board.get_node(13)
    assert board.get_edge(np.int64(5)) is board.get_edge(5)
    assert board.get_tile(np.int64(4)) is board.get_tile(4)
    assert board.get_node(13.0) is None
    assert board.get_edge(5.0) is None
    assert board.get_tile(4.0) is None


def test_occupancy_views(board):
    board.place_settlement(1, 13)
    board.place_settlement(1, 30)
    board.upgrade_to_city(1, 30)
    board.place_road(1, 5)

    assert board.settlements_of(1) == [13]
    assert board.cities_of(1) == [30]
    assert board.roads_of(1) == [5]
    assert board.get_node(30).building == BuildingType.CITY
    assert board.get_node(13).has_settlement_by(1)
    assert not board.get_node(13).has_settlement_by(2)
