"""
Pathfinding Game - Interactive Window
=====================================

The pygame front end: opens the window, turns key presses into moves on the
GridWorld, animates the player between cells and paints each frame.

Workflow:

    1. GridWorld holds the level and the player's logical cell
    2. compute_shortest_paths() labels every cell once at startup
    3. Each frame: events -> update(dt) -> render

Controls:
- Arrow Keys: Move
- R: Restart from the start cell
- P: Toggle path overlay
- ESC: Quit

Usage:
------
    from pathgame.visualization.game import PathfindingGame

    game = PathfindingGame()
    game.run()  # Blocking - opens Pygame window
"""

from __future__ import annotations

import os
import time
import logging
from dataclasses import replace
from typing import Dict, Optional

from pathgame.core.config import GameConfig
from pathgame.core.definitions import Direction
from pathgame.simulation.grid_world import GridWorld, MoveResult
from pathgame.simulation.shortest_paths import ShortestPathField, compute_shortest_paths
from pathgame.visualization.animation import PlayerAnimator
from pathgame.visualization.asset_manager import AssetManager
from pathgame.visualization.renderer import GameRenderer

logger = logging.getLogger(__name__)

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False
    logger.error("Pygame not available - install with: pip install pygame")


def _arrow_keys() -> Dict[int, Direction]:
    return {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
    }


class PathfindingGame:
    """
    Single-player grid game with a shortest-path overlay.

    The window is exactly grid size times tile size. The shortest-path field
    is computed once here and reused for every frame.
    """

    def __init__(self, world: Optional[GridWorld] = None, config: Optional[GameConfig] = None):
        """
        Args:
            world: Level to play (default 20x15 level if None)
            config: Optional configuration (uses defaults if None)
        """
        if not PYGAME_AVAILABLE:
            raise RuntimeError("Pygame is required. Install with: pip install pygame")

        self.world = world or GridWorld.default()
        self.config = replace(config or GameConfig(),
                              grid_width=self.world.width,
                              grid_height=self.world.height).validate()

        pygame.init()
        pygame.display.set_caption(self.config.window_title)
        self.screen = pygame.display.set_mode((self.config.window_width, self.config.window_height))
        self.clock = pygame.time.Clock()

        self.assets = AssetManager(tile_size=self.config.tile_size,
                                   background_path=self.config.background_path)
        self.renderer = GameRenderer(self.config, self.assets)

        self.field: ShortestPathField = compute_shortest_paths(self.world)
        self.animator = PlayerAnimator(
            self.world.position,
            move_duration=self.config.move_duration,
            easing=self.config.easing,
            run_frame_interval=self.config.run_frame_interval,
        )
        self._keys = _arrow_keys()
        self.show_win = False
        self.frame_count = 0

        if not self.field.is_reachable(self.world.start):
            logger.warning("Goal %s is unreachable from start %s", self.world.goal, self.world.start)

        logger.info("Game initialized: %dx%d grid, tile=%dpx, %d obstacles",
                    self.world.width, self.world.height, self.config.tile_size,
                    self.world.obstacle_count)

    # ==========================================
    # MAIN LOOP
    # ==========================================

    def run(self, max_frames: Optional[int] = None) -> None:
        """
        Run the game (blocking) until the window is closed or ESC is pressed.

        When running under tests (PATHGAME_TEST_MODE or pytest), a small
        default max_frames is used to avoid infinite loops.
        """
        if max_frames is None and (os.environ.get('PATHGAME_TEST_MODE') or os.environ.get('PYTEST_CURRENT_TEST')):
            try:
                max_frames = int(os.environ.get('PATHGAME_RUN_MAX_FRAMES', '10'))
            except ValueError:
                max_frames = 10

        running = True
        last_time = time.time()

        try:
            while running:
                current_time = time.time()
                dt = current_time - last_time
                last_time = current_time

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        running = self.handle_key(event.key) and running

                self.update(dt)
                self.render()
                self.clock.tick(self.config.fps)

                self.frame_count += 1
                if max_frames is not None and self.frame_count >= max_frames:
                    break
        finally:
            self.close()

    # ==========================================
    # INPUT
    # ==========================================

    def handle_key(self, key: int) -> bool:
        """
        Handle a key press.

        Returns:
            False if the game should quit, True otherwise
        """
        if key == pygame.K_ESCAPE:
            return False

        if key == pygame.K_r:
            self.restart()

        elif key == pygame.K_p:
            self.config.show_path_overlay = not self.config.show_path_overlay
            logger.debug("Path overlay %s", "on" if self.config.show_path_overlay else "off")

        elif key in self._keys:
            self.request_move(self._keys[key])

        return True

    def request_move(self, direction: Direction) -> Optional[MoveResult]:
        """
        Move now, or buffer the direction if a move is still animating.

        Returns:
            The MoveResult when the move was attempted, None when buffered
            or ignored after winning
        """
        if self.world.won:
            return None
        if self.animator.moving:
            self.animator.buffer(direction)
            return None
        return self._apply_move(direction)

    def _apply_move(self, direction: Direction) -> MoveResult:
        start = self.world.position
        result = self.world.try_move(direction)
        if result.moved:
            self.animator.start_move(start, result.position)
            logger.debug("Moved %s -> %s (%s steps left)", start, result.position,
                         self.field.distance_to_goal(result.position))
        else:
            logger.debug("Move %s rejected: %s", direction.name, result.reason)
        return result

    def restart(self) -> None:
        self.world.reset()
        self.animator.place(self.world.position)
        self.show_win = False
        logger.info("Game restarted")

    # ==========================================
    # UPDATE & RENDER
    # ==========================================

    def update(self, dt: float) -> None:
        finished = self.animator.update(dt)
        if not finished:
            return

        if self.world.won:
            self.show_win = True
            self.animator.pending = None
            return

        pending = self.animator.take_pending()
        if pending is not None:
            self._apply_move(pending)

    def render(self) -> None:
        self.renderer.render(self.screen, self.world, self.field, self.animator,
                             show_win=self.show_win)
        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()


def play(world: Optional[GridWorld] = None, config: Optional[GameConfig] = None) -> None:
    """
    Convenience function to open the game window.

    Args:
        world: Level to play
        config: Optional configuration
    """
    game = PathfindingGame(world, config)
    game.run()
