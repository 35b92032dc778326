"""
Board rendering with matplotlib.
Tiles are drawn as pointy-top hexes of unit radius laid out in 3-4-5-4-3 rows.
"""

from typing import Tuple

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import RegularPolygon, Circle

from board_topology import BoardTopology, ROW_SIZES
from catan_env import BoardState
from game_constants import BuildingType, TileType


PLAYER_COLORS = ['#FF4444', '#4444FF', '#FFAA00', '#44FF44']

TERRAIN_COLORS = {
    TileType.WOOD: '#228B22',
    TileType.BRICK: '#8B4513',
    TileType.WHEAT: '#FFD700',
    TileType.SHEEP: '#90EE90',
    TileType.ORE: '#708090',
    TileType.DESERT: '#F4A460',
}

# Hex geometry constants
HEX_RADIUS = 1.0
HEX_WIDTH = np.sqrt(3) * HEX_RADIUS
HEX_HEIGHT = 2 * HEX_RADIUS

# Corner angles, clockwise from the top vertex
CORNER_ANGLES = np.array([np.pi/2, np.pi/6, -np.pi/6, -np.pi/2, -5*np.pi/6, 5*np.pi/6])


def tile_row_col(tile_id: int) -> Tuple[int, int]:
    row_start = 0
    for row, size in enumerate(ROW_SIZES):
        if tile_id < row_start + size:
            return row, tile_id - row_start
        row_start += size
    raise ValueError(f"Tile {tile_id} is not on the board")


def tile_center(tile_id: int) -> Tuple[float, float]:
    """2D centre of a tile."""
    row, col = tile_row_col(tile_id)
    y = -row * (HEX_HEIGHT * 0.75)
    row_offset = -(ROW_SIZES[row] - 1) * HEX_WIDTH / 2
    x = row_offset + col * HEX_WIDTH
    return x, y


def node_positions(topology: BoardTopology) -> np.ndarray:
    """(num_nodes, 2) array of node coordinates, averaged over the tiles sharing each node."""
    sums = np.zeros((topology.num_nodes, 2))
    counts = np.zeros(topology.num_nodes)

    for tile_id in range(topology.num_tiles):
        cx, cy = tile_center(tile_id)
        corners = np.array(topology.get_tile_nodes(tile_id))
        sums[corners, 0] += cx + HEX_RADIUS * np.cos(CORNER_ANGLES)
        sums[corners, 1] += cy + HEX_RADIUS * np.sin(CORNER_ANGLES)
        counts[corners] += 1

    return sums / counts[:, np.newaxis]


def plot_board(board: BoardState, ax=None, show_legend=True):
    """Plot the board with tiles, number tokens, roads, settlements and cities."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(14, 12))
    ax.set_aspect('equal')

    positions = node_positions(board.topology)

    for tile in board.tiles:
        center_x, center_y = tile_center(tile.id)
        hexagon = RegularPolygon(
            (center_x, center_y), numVertices=6, radius=HEX_RADIUS,
            orientation=0, facecolor=TERRAIN_COLORS[tile.terrain], edgecolor='black',
            linewidth=2, alpha=0.7
        )
        ax.add_patch(hexagon)

        if tile.has_number_token:
            circle = Circle((center_x, center_y), radius=0.35,
                            facecolor='white', edgecolor='black',
                            linewidth=1.5, zorder=3)
            ax.add_patch(circle)

            number_color = 'red' if tile.token in [6, 8] else 'black'
            ax.text(center_x, center_y, str(tile.token),
                    ha='center', va='center', fontsize=16,
                    fontweight='bold', color=number_color, zorder=4)

    for edge in board.edges.values():
        if edge.has_road:
            a, b = board.topology.get_edge_endpoints(edge.id)
            color = PLAYER_COLORS[edge.owner % len(PLAYER_COLORS)]
            ax.plot(positions[[a, b], 0], positions[[a, b], 1], color=color,
                    linewidth=5, solid_capstyle='round', zorder=5)

    for node in board.nodes.values():
        if node.is_occupied:
            x, y = positions[node.id]
            color = PLAYER_COLORS[node.owner % len(PLAYER_COLORS)]
            if node.building == BuildingType.CITY:
                ax.scatter(x, y, s=500, marker='s', color=color,
                           edgecolors='black', linewidths=2.5, zorder=6)
            else:
                ax.scatter(x, y, s=250, marker='o', color=color,
                           edgecolors='black', linewidths=2.5, zorder=6)

    ax.set_xlim(-6, 6)
    ax.set_ylim(-8, 2.5)
    ax.axis('off')

    if show_legend:
        patches = [
            mpatches.Patch(color=color, label=terrain.value.capitalize())
            for terrain, color in TERRAIN_COLORS.items()
        ]

        active_players = {n.owner for n in board.nodes.values() if n.is_occupied}
        active_players |= {e.owner for e in board.edges.values() if e.has_road}
        player_patches = [
            mpatches.Patch(color=PLAYER_COLORS[p % len(PLAYER_COLORS)], label=f'Player {p}')
            for p in sorted(active_players)
        ]
        if player_patches:
            patches.append(mpatches.Patch(color='white', label=''))
            patches.extend(player_patches)

        ax.legend(handles=patches, loc='upper left', bbox_to_anchor=(1.02, 1), fontsize=10)

    return ax


def save_board_image(board: BoardState, path: str, figsize=(14, 12)):
    """Render the board to an image file without touching the pyplot state."""
    fig = Figure(figsize=figsize)
    ax = fig.add_subplot(1, 1, 1)
    plot_board(board, ax=ax)
    fig.savefig(path, bbox_inches='tight')
    return path
