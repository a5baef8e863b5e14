"""
Pathgame Visualization - Renderer
=================================

Draws one frame of the game onto a pygame surface.

Layer order:
1. Background image (or light gray fill)
2. Remaining shortest path from the player's cell
3. Obstacles
4. Player stick figure at its animated position
5. Goal tile
6. Win overlay and message
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

try:
    import pygame
    from pygame import Surface
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from pathgame.core.config import GameConfig
from pathgame.core.definitions import COLORS, TileID, WIN_MESSAGE
from pathgame.simulation.grid_world import GridWorld
from pathgame.simulation.shortest_paths import ShortestPathField
from pathgame.visualization.animation import PlayerAnimator
from pathgame.visualization.asset_manager import AssetManager

logger = logging.getLogger(__name__)

# Reference geometry of the stick figure, in pixels for a 32px tile
_REF_TILE = 32
_BODY = 24
_LEG_INSET = 4
_LEG_LENGTH = 12
_LEG_SPREAD = 6
_ARM_INSET = 2
_ARM_DROP = 6
_ARM_REACH = 10
_ARM_RISE = 12
_SHOULDER = 4


class GameRenderer:
    """
    Paints one frame from the current world and animation state.

    Usage:
        renderer = GameRenderer(config, assets)

        # In game loop:
        renderer.render(screen, world, field, animator)
    """

    def __init__(self, config: GameConfig, assets: AssetManager):
        if not PYGAME_AVAILABLE:
            raise RuntimeError("Pygame required for rendering")

        self.config = config
        self.assets = assets
        self._win_font: Optional[pygame.font.Font] = None
        self._win_font_width = 0

    @property
    def tile_size(self) -> int:
        return self.config.tile_size

    def render(self, surface: Surface, world: GridWorld, field: ShortestPathField,
               animator: PlayerAnimator, show_win: bool = False) -> None:
        """Draw every layer for the current state."""
        self.render_background(surface)
        if self.config.show_path_overlay:
            self.render_path(surface, world, field)
        self.render_obstacles(surface, world)
        self.render_player(surface, animator)
        self.render_goal(surface, world)
        if show_win:
            self.render_win(surface)

    def render_background(self, surface: Surface) -> None:
        background = self.assets.load_background(surface.get_size())
        if background is not None:
            surface.blit(background, (0, 0))
        else:
            surface.fill(COLORS['background'])

    def render_path(self, surface: Surface, world: GridWorld, field: ShortestPathField) -> int:
        """
        Highlight the remaining shortest path.

        Returns:
            Number of cells highlighted
        """
        overlay = self.assets.get_path_overlay()
        path = field.path_from(world.position)
        for row, col in path:
            surface.blit(overlay, (col * self.tile_size, row * self.tile_size))
        return len(path)

    def render_obstacles(self, surface: Surface, world: GridWorld) -> None:
        tile = self.assets.get_tile(TileID.OBSTACLE)
        for row, col in world.obstacles():
            surface.blit(tile, (col * self.tile_size, row * self.tile_size))

    def render_goal(self, surface: Surface, world: GridWorld) -> None:
        row, col = world.goal
        surface.blit(self.assets.get_tile('goal'), (col * self.tile_size, row * self.tile_size))

    def render_player(self, surface: Surface, animator: PlayerAnimator) -> None:
        """
        Draw the stick figure: blue body, running black legs, raised red arms.

        Frame 0 spreads the legs outward, frame 1 crosses them inward.
        """
        s = self.tile_size / _REF_TILE
        body = max(1, int(_BODY * s))
        px, py = animator.pixel_position(self.tile_size)
        x = px + (self.tile_size - body) // 2
        y = py + (self.tile_size - body) // 2

        pygame.draw.rect(surface, COLORS['player_body'], (x, y, body, body))

        # Legs
        leg_x = x + int(_LEG_INSET * s)
        leg_y = y + body
        right_x = leg_x + body - int(2 * _LEG_INSET * s)
        spread = int(_LEG_SPREAD * s)
        leg_end_y = leg_y + int(_LEG_LENGTH * s)
        if animator.frame == 0:
            left_end, right_end = leg_x - spread, right_x + spread
        else:
            left_end, right_end = leg_x + spread, right_x - spread
        pygame.draw.line(surface, COLORS['player_legs'], (leg_x, leg_y), (left_end, leg_end_y))
        pygame.draw.line(surface, COLORS['player_legs'], (right_x, leg_y), (right_end, leg_end_y))

        # Arms
        arm_x = x + int(_ARM_INSET * s)
        arm_y = y + int(_ARM_DROP * s)
        arm_end_y = arm_y - int(_ARM_RISE * s)
        reach = int(_ARM_REACH * s)
        shoulder = int(_SHOULDER * s)
        pygame.draw.line(surface, COLORS['player_arms'], (arm_x, arm_y), (arm_x - reach, arm_end_y))
        pygame.draw.line(surface, COLORS['player_arms'], (arm_x + body - shoulder, arm_y),
                         (arm_x + body + shoulder, arm_end_y))

    def render_win(self, surface: Surface) -> Tuple[int, int]:
        """
        Dim the window and center the win message.

        Returns:
            (x, y) of the message's top-left corner
        """
        width, height = surface.get_size()
        surface.blit(self.assets.get_win_overlay((width, height)), (0, 0))

        font = self._fit_win_font(width)
        text = font.render(WIN_MESSAGE, True, COLORS['win_text'])
        x = (width - text.get_width()) // 2
        y = (height - font.get_height()) // 2
        surface.blit(text, (x, y))
        return (x, y)

    def _fit_win_font(self, max_width: int) -> pygame.font.Font:
        """Largest bold font up to win_font_size that fits max_width."""
        if self._win_font is not None and self._win_font_width == max_width:
            return self._win_font

        size = self.config.win_font_size
        font = pygame.font.SysFont(self.config.font_name, size, bold=True)
        while size > 8 and font.size(WIN_MESSAGE)[0] > max_width:
            size -= 2
            font = pygame.font.SysFont(self.config.font_name, size, bold=True)
        if size != self.config.win_font_size:
            logger.debug("Win message font reduced to %dpx to fit %dpx", size, max_width)

        self._win_font = font
        self._win_font_width = max_width
        return font
