"""
Asset Manager - Background Image and Tile Surfaces
==================================================

Loads the optional background image and builds the few solid-color surfaces
the renderer blits every frame.

Key Features:
- Never crashes on a missing or broken background image
- Decodes images with Pillow, so formats such as WebP work regardless of
  the SDL_image build pygame ships with
- Caches surfaces per tile size
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from PIL import Image, UnidentifiedImageError

from pathgame.core.definitions import COLORS, Color, TileID

logger = logging.getLogger(__name__)

try:
    import pygame
    from pygame import Surface
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False
    logger.warning("Pygame not available - asset loading disabled")


TILE_COLOR_NAMES: Dict[int, str] = {
    TileID.OBSTACLE: 'obstacle',
}


class AssetManager:
    """
    Manages the background image and cached tile surfaces.

    Usage:
    ------
        assets = AssetManager(tile_size=32, background_path="NEW.webp")
        background = assets.load_background((640, 480))  # None on failure
        overlay = assets.get_path_overlay()
    """

    def __init__(self, tile_size: int = 32,
                 background_path: Optional[Union[str, Path]] = None):
        """
        Args:
            tile_size: Size of tiles in pixels (square)
            background_path: Optional background image file
        """
        if not PYGAME_AVAILABLE:
            raise RuntimeError("Pygame is required for AssetManager")

        self.tile_size = tile_size
        self.background_path = Path(background_path) if background_path else None

        self._tile_cache: Dict[Tuple[str, int], Surface] = {}
        self._background: Optional[Surface] = None
        self._background_size: Optional[Tuple[int, int]] = None
        self._background_failed = False

    def set_tile_size(self, tile_size: int) -> None:
        if tile_size != self.tile_size:
            self.tile_size = tile_size
            self.clear_cache()

    # ==========================================
    # BACKGROUND
    # ==========================================

    def load_background(self, size: Tuple[int, int]) -> Optional[Surface]:
        """
        Get the background image stretched to the given size.

        The file is read once. Failures are logged and remembered, and the
        caller is expected to fill a plain color instead.

        Args:
            size: (width, height) of the window

        Returns:
            pygame.Surface, or None if no usable image is configured
        """
        if self.background_path is None or self._background_failed:
            return None

        if self._background is not None and self._background_size == tuple(size):
            return self._background

        try:
            with Image.open(self.background_path) as img:
                rgba = img.convert('RGBA')
                raw = pygame.image.frombuffer(rgba.tobytes(), rgba.size, 'RGBA')
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError, pygame.error) as e:
            self._background_failed = True
            logger.error("Background image failed to load from %s: %s", self.background_path, e)
            return None

        scaled = pygame.transform.smoothscale(raw, tuple(size))
        if pygame.display.get_surface() is not None:
            scaled = scaled.convert()
        self._background = scaled
        self._background_size = tuple(size)
        logger.info("Background image loaded successfully from %s", self.background_path)
        return self._background

    # ==========================================
    # TILES
    # ==========================================

    def get_tile(self, name: Union[str, int]) -> Surface:
        """
        Solid tile for a palette color name or TileID.

        Unknown names fall back to hot pink so they are easy to spot.
        """
        if not isinstance(name, str):
            name = TILE_COLOR_NAMES.get(int(name), 'unknown')
        return self._solid(name, COLORS.get(name, (255, 0, 255)), self.tile_size, self.tile_size)

    def get_path_overlay(self) -> Surface:
        """Translucent tile for one cell of the remaining path."""
        return self._solid('path_overlay', COLORS['path_overlay'], self.tile_size, self.tile_size)

    def get_win_overlay(self, size: Tuple[int, int]) -> Surface:
        """Translucent full-window dimming layer."""
        return self._solid('win_overlay', COLORS['win_overlay'], size[0], size[1])

    def _solid(self, name: str, color: Color, width: int, height: int) -> Surface:
        cache_key = (f"{name}_{width}x{height}", self.tile_size)
        surface = self._tile_cache.get(cache_key)
        if surface is None:
            if len(color) == 4:
                surface = Surface((width, height), pygame.SRCALPHA)
            else:
                surface = Surface((width, height))
            surface.fill(color)
            self._tile_cache[cache_key] = surface
        return surface

    def clear_cache(self) -> None:
        """Clear all cached surfaces (the background is reloaded on demand)."""
        self._tile_cache.clear()
        self._background = None
        self._background_size = None
        logger.debug("Asset caches cleared")
