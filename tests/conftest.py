"""
Shared test fixtures.

Boards are built from fixed seeds so every test sees the same layout.
"""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from board_topology import BoardTopology
from catan_env import BoardState, Tile, generate_random_board
from dice import StandardDice
from game_constants import Resource, TileType
from game_engine import CatanEngine
from game_state import Player


@pytest.fixture(scope="session")
def topology():
    return BoardTopology()


@pytest.fixture
def board(topology):
    return generate_random_board(42, topology)


@pytest.fixture
def p1():
    return Player(player_id=1)


@pytest.fixture
def p2():
    return Player(player_id=2)


@pytest.fixture
def engine(board, p1, p2):
    engine = CatanEngine(board, StandardDice(42))
    engine.set_players([p1, p2])
    return engine


@pytest.fixture
def wheat_board(topology):
    """Tile 0 is wheat with token 8; every other tile is a token-less desert."""
    tiles = [Tile(id=0, terrain=TileType.WHEAT, token=8)]
    tiles += [Tile(id=i, terrain=TileType.DESERT) for i in range(1, 19)]
    return BoardState(topology, tiles, seed=0)


def give(player, cost, times=1):
    """Top up a player's hand with `times` copies of a cost."""
    for resource, amount in cost.items():
        player.add_resource(resource, amount * times)


def hand(player):
    return {r: player.resource_count(r) for r in Resource}
