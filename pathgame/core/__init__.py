"""
Pathgame Core Module
====================

Constants, type definitions and configuration shared by every other module.

Usage:
    from pathgame.core import TileID, Direction, GameConfig
"""

from pathgame.core.definitions import (
    Cell,
    TileID,
    Direction,
    DIRECTION_DELTAS,
    SEARCH_DELTAS,
    GRID_WIDTH,
    GRID_HEIGHT,
    TILE_SIZE,
    COLORS,
    WIN_MESSAGE,
)
from pathgame.core.config import GameConfig, ConfigError

__all__ = [
    'Cell',
    'TileID',
    'Direction',
    'DIRECTION_DELTAS',
    'SEARCH_DELTAS',
    'GRID_WIDTH',
    'GRID_HEIGHT',
    'TILE_SIZE',
    'COLORS',
    'WIN_MESSAGE',
    'GameConfig',
    'ConfigError',
]
