"""
PATHGAME DEFINITIONS
====================
Central constants and type definitions for the entire project.

This file is the SINGLE SOURCE OF TRUTH for:
- Tile IDs stored in the level grid
- Grid dimensions and the default level
- Movement directions and search neighbor order
- The color palette used by the renderer

Import from here instead of duplicating constants across modules.

Coordinates are always (row, col). The level grid is a numpy array of shape
(GRID_HEIGHT, GRID_WIDTH).
"""

from typing import Dict, List, Tuple
from enum import IntEnum

Cell = Tuple[int, int]
Color = Tuple[int, ...]

# ==========================================
# TILE IDS
# ==========================================

class TileID(IntEnum):
    """Tile IDs stored in the level grid."""
    FREE = 0            # Walkable cell
    OBSTACLE = -1       # Static obstacle (impassable)


ID_TO_NAME: Dict[int, str] = {t.value: t.name for t in TileID}

# Layout file characters
CHAR_TO_TILE: Dict[str, int] = {
    '.': TileID.FREE,
    '#': TileID.OBSTACLE,
    'S': TileID.FREE,   # Start (walkable)
    'G': TileID.FREE,   # Goal (walkable)
}

START_CHAR = 'S'
GOAL_CHAR = 'G'

# ==========================================
# GRID DIMENSIONS
# ==========================================

GRID_WIDTH: int = 20    # Columns
GRID_HEIGHT: int = 15   # Rows
TILE_SIZE: int = 32     # Pixels per tile edge

# Default level
DEFAULT_START: Cell = (1, 1)
DEFAULT_GOAL: Cell = (13, 18)
DEFAULT_OBSTACLES: List[Cell] = [(3, 3), (3, 4), (3, 5), (3, 6)]

# ==========================================
# DIRECTIONS
# ==========================================

class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


DIRECTION_DELTAS: Dict[Direction, Cell] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# Neighbor expansion order for the shortest-path search. Equal-length
# paths are resolved by whichever neighbor relaxes a cell first.
SEARCH_DELTAS: Tuple[Cell, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

# ==========================================
# COLOR PALETTE
# ==========================================

COLORS: Dict[str, Color] = {
    'background': (192, 192, 192),      # Light gray, used when no image
    'obstacle': (255, 0, 0),
    'goal': (0, 255, 0),
    'player_body': (0, 0, 255),
    'player_legs': (0, 0, 0),
    'player_arms': (255, 0, 0),
    'path_overlay': (255, 223, 186, 150),   # Light orange, translucent
    'win_overlay': (0, 0, 0, 150),
    'win_text': (255, 255, 255),
}

WIN_MESSAGE = "Congratulations! You've reached home!"
