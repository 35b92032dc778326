"""Tests for dice-roll production."""

from catan_env import generate_random_board
from conftest import give, hand
from game_constants import CITY_COST, Resource
from game_engine import CatanEngine


def test_city_on_rolled_tile_gets_two(wheat_board, p1, p2):
    engine = CatanEngine(wheat_board)
    engine.set_players([p1, p2])
    engine.request_build_settlement(1, 0, is_setup=True)
    give(p1, CITY_COST)
    engine.request_build_city(1, 0)
    engine.request_build_settlement(2, 30, is_setup=True)
    before_p2 = hand(p2)

    payouts = engine.distribute_resources(8)

    assert payouts == {1: {Resource.GRAIN: 2}}
    assert p1.resource_count(Resource.GRAIN) == 2
    assert p1.total_resource_count() == 2
    assert hand(p2) == before_p2


def test_settlements_get_one_each(wheat_board, p1, p2):
    engine = CatanEngine(wheat_board)
    engine.set_players([p1, p2])
    engine.request_build_settlement(1, 0, is_setup=True)
    engine.request_build_settlement(2, 12, is_setup=True)

    engine.distribute_resources(8)

    assert p1.resource_count(Resource.GRAIN) == 1
    assert p2.resource_count(Resource.GRAIN) == 1


def test_other_numbers_pay_nothing(wheat_board, p1):
    engine = CatanEngine(wheat_board)
    engine.set_players([p1])
    engine.request_build_settlement(1, 0, is_setup=True)
    for roll in (2, 3, 4, 5, 6, 9, 10, 11, 12):
        assert engine.distribute_resources(roll) == {}
    assert p1.total_resource_count() == 0


def test_seven_pays_nothing(topology, p1, p2):
    board = generate_random_board(42, topology)
    engine = CatanEngine(board)
    engine.set_players([p1, p2])
    for node_id in range(0, 54, 5):
        engine.request_build_settlement(1, node_id, is_setup=True)

    assert engine.distribute_resources(7) == {}
    assert p1.total_resource_count() == 0
    assert p2.total_resource_count() == 0


def test_payout_matches_tile_resources(board, p1):
    engine = CatanEngine(board)
    engine.set_players([p1])
    tile = board.tiles_with_number(6)[0]
    corner = board.topology.get_tile_nodes(tile.id)[0]
    engine.request_build_settlement(1, corner, is_setup=True)

    payouts = engine.distribute_resources(6)

    expected = {}
    for t in board.tiles_with_number(6):
        if corner in board.topology.get_tile_nodes(t.id):
            expected[t.resource] = expected.get(t.resource, 0) + 1
    assert payouts == {1: expected}
