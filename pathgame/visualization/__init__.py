"""
Pathgame Visualization Module
=============================

Pygame front end for the grid game.

Architecture:
------------
- asset_manager: Background image loading with a plain-color fallback
- animation: Easing, one-cell move tweens and the running cycle
- renderer: Paints background, path overlay, obstacles, player, goal
- game: Window, event loop and key handling

Primary Entry Point:
--------------------
    from pathgame.visualization import PathfindingGame

    game = PathfindingGame()
    game.run()  # Opens the game window
"""

from pathgame.visualization.asset_manager import AssetManager
from pathgame.visualization.animation import (
    Vector2,
    MoveTween,
    RunCycle,
    PlayerAnimator,
    EASINGS,
    get_easing,
)
from pathgame.visualization.renderer import GameRenderer
from pathgame.visualization.game import PathfindingGame, play

__all__ = [
    'AssetManager',
    'Vector2',
    'MoveTween',
    'RunCycle',
    'PlayerAnimator',
    'EASINGS',
    'get_easing',
    'GameRenderer',
    'PathfindingGame',
    'play',
]
