"""
Pathgame Simulation Module
==========================
Headless game logic.

This module contains:
- grid_world: level grid, movement rules, win condition, layout parsing
- shortest_paths: Dijkstra precomputation from the goal for the path overlay
"""

from .grid_world import (
    GridWorld,
    MoveResult,
    LayoutError,
)
from .shortest_paths import (
    ShortestPathField,
    compute_shortest_paths,
    UNREACHABLE,
)

__all__ = [
    'GridWorld',
    'MoveResult',
    'LayoutError',
    'ShortestPathField',
    'compute_shortest_paths',
    'UNREACHABLE',
]
