"""
Pathgame - Grid Pathfinding Game
================================

Walk from the start cell to the goal around static obstacles while the
shortest remaining path is highlighted under your feet.

Submodules:
- core: Tile IDs, grid constants, colors and GameConfig
- simulation: GridWorld game logic and the Dijkstra distance field
- visualization: Pygame window, renderer and animation
"""

__version__ = "1.0.0"

__all__ = ['core', 'simulation', 'visualization']
