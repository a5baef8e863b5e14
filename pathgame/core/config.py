"""
Game configuration.

``GameConfig`` collects every tunable of the game in one dataclass. Values
come from the dataclass defaults, then ``PATHGAME_*`` environment variables
(``GameConfig.from_env``), then command-line flags applied by ``main.py``.
"""

from __future__ import annotations

import os
import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from pathgame.core.definitions import GRID_WIDTH, GRID_HEIGHT, TILE_SIZE

logger = logging.getLogger(__name__)


EASING_NAMES = ('linear', 'ease_out_quad')


class ConfigError(ValueError):
    """Raised when a configuration value is missing or invalid."""


@dataclass
class GameConfig:
    """Configuration for the game window, animation and assets."""

    # Window settings
    window_title: str = "Pathfinding Game"
    fps: int = 60

    # Grid
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    tile_size: int = TILE_SIZE

    # Animation
    move_duration: float = 0.1  # Seconds per one-cell move
    easing: str = 'linear'
    run_frame_interval: float = 0.1  # Seconds per running frame

    # Assets
    background_path: Optional[str] = "NEW.webp"
    layout_path: Optional[str] = None

    # Visual options
    show_path_overlay: bool = True
    font_name: str = 'Arial'
    win_font_size: int = 36

    @property
    def window_width(self) -> int:
        return self.grid_width * self.tile_size

    @property
    def window_height(self) -> int:
        return self.grid_height * self.tile_size

    def validate(self) -> 'GameConfig':
        """
        Check value ranges.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigError: on the first invalid value
        """
        for name in ('fps', 'grid_width', 'grid_height', 'tile_size', 'win_font_size'):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.move_duration < 0:
            raise ConfigError(f"move_duration must be >= 0, got {self.move_duration!r}")
        if self.run_frame_interval <= 0:
            raise ConfigError(f"run_frame_interval must be positive, got {self.run_frame_interval!r}")
        if self.easing not in EASING_NAMES:
            raise ConfigError(f"Unknown easing {self.easing!r} (expected one of {', '.join(EASING_NAMES)})")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'GameConfig':
        """
        Build a config from defaults overridden by PATHGAME_* variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ConfigError: if a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        config = cls()

        for var, (attr, parse) in _ENV_FIELDS.items():
            raw = env.get(var)
            if raw is None or raw == '':
                continue
            try:
                value = parse(raw)
            except ValueError as e:
                raise ConfigError(f"{var}={raw!r} is not valid: {e}") from e
            setattr(config, attr, value)
            logger.debug("Config %s=%r from %s", attr, value, var)

        return config


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ('1', 'true', 'yes', 'on'):
        return True
    if value in ('0', 'false', 'no', 'off'):
        return False
    raise ValueError("expected a boolean")


_ENV_FIELDS: Dict[str, tuple] = {
    'PATHGAME_BACKGROUND': ('background_path', str),
    'PATHGAME_LAYOUT': ('layout_path', str),
    'PATHGAME_TILE_SIZE': ('tile_size', int),
    'PATHGAME_FPS': ('fps', int),
    'PATHGAME_MOVE_DURATION': ('move_duration', float),
    'PATHGAME_EASING': ('easing', str),
    'PATHGAME_SHOW_PATH': ('show_path_overlay', _parse_bool),
}
