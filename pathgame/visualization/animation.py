"""
Pathgame Visualization - Animation
==================================

Delta-time animation state for the player.

Includes:
- Vector2: float (x, y) position with interpolation
- Easing functions: linear, ease_out_quad
- MoveTween: one-cell move from a start cell to a target cell
- RunCycle: two-frame running legs
- PlayerAnimator: visual position, active tween, buffered input

Logical movement happens in GridWorld immediately; these classes only decide
where the player is drawn between cells.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

from pathgame.core.config import ConfigError
from pathgame.core.definitions import Cell, Direction

logger = logging.getLogger(__name__)

EasingFn = Callable[[float], float]


# ==========================================
# VECTOR MATH
# ==========================================

class Vector2:
    """2D vector used for interpolated positions. x is the column, y the row."""

    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def lerp(self, target: 'Vector2', t: float) -> 'Vector2':
        """
        Linear interpolation toward target.

        Args:
            target: Target position to interpolate toward
            t: Interpolation factor, clamped to 0.0..1.0

        Returns:
            New interpolated Vector2
        """
        t = max(0.0, min(1.0, t))
        return Vector2(
            self.x + (target.x - self.x) * t,
            self.y + (target.y - self.y) * t
        )

    def to_cell(self) -> Cell:
        """Nearest grid cell as (row, col)."""
        return (int(round(self.y)), int(round(self.x)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __repr__(self) -> str:
        return f"Vector2({self.x:.2f}, {self.y:.2f})"

    @classmethod
    def from_grid(cls, row: int, col: int) -> 'Vector2':
        """Create from grid coordinates (row, col)."""
        return cls(col, row)


# ==========================================
# EASING
# ==========================================

def linear(t: float) -> float:
    return t


def ease_out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


EASINGS: Dict[str, EasingFn] = {
    'linear': linear,
    'ease_out_quad': ease_out_quad,
}


def get_easing(name: str) -> EasingFn:
    try:
        return EASINGS[name]
    except KeyError:
        raise ConfigError(f"Unknown easing {name!r}") from None


# ==========================================
# MOVE TWEEN
# ==========================================

class MoveTween:
    """Animates a position from one cell to the next over a fixed duration."""

    def __init__(self, start: Cell, end: Cell, duration: float, easing: EasingFn = linear):
        self.start = Vector2.from_grid(*start)
        self.end = Vector2.from_grid(*end)
        self.target: Cell = end
        self.duration = max(0.0, duration)
        self.easing = easing
        self.elapsed = 0.0

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def progress(self) -> float:
        """Normalized progress (0.0 to 1.0) before easing."""
        return min(1.0, self.elapsed / self.duration) if self.duration > 0 else 1.0

    @property
    def position(self) -> Vector2:
        if self.finished:
            return Vector2(self.end.x, self.end.y)
        return self.start.lerp(self.end, self.easing(self.progress()))

    def update(self, dt: float) -> None:
        self.elapsed = min(self.duration, self.elapsed + dt)

    def snap(self) -> None:
        """Jump straight to the end of the move."""
        self.elapsed = self.duration


# ==========================================
# RUNNING CYCLE
# ==========================================

class RunCycle:
    """Alternates between two leg frames while the player is moving."""

    FRAME_COUNT = 2

    def __init__(self, interval: float = 0.1):
        self.interval = interval
        self.frame = 0
        self._timer = 0.0

    def update(self, dt: float, moving: bool) -> None:
        if not moving:
            self._timer = 0.0
            return
        self._timer += dt
        while self._timer >= self.interval:
            self._timer -= self.interval
            self.frame = (self.frame + 1) % self.FRAME_COUNT

    def step(self) -> int:
        """Advance one frame immediately (used when a move starts)."""
        self.frame = (self.frame + 1) % self.FRAME_COUNT
        self._timer = 0.0
        return self.frame

    def reset(self) -> None:
        self.frame = 0
        self._timer = 0.0


# ==========================================
# PLAYER ANIMATOR
# ==========================================

class PlayerAnimator:
    """
    Visual state of the player.

    At most one direction is buffered while a move is animating; a newer key
    press replaces it. The owner applies it once the tween finishes.
    """

    def __init__(self, start: Cell, move_duration: float = 0.1,
                 easing: str = 'linear', run_frame_interval: float = 0.1):
        self.move_duration = move_duration
        self.easing = get_easing(easing)
        self.run_cycle = RunCycle(run_frame_interval)
        self.tween: Optional[MoveTween] = None
        self.pending: Optional[Direction] = None
        self._position = Vector2.from_grid(*start)

    @property
    def moving(self) -> bool:
        return self.tween is not None and not self.tween.finished

    @property
    def position(self) -> Vector2:
        if self.tween is not None:
            return self.tween.position
        return self._position

    @property
    def frame(self) -> int:
        return self.run_cycle.frame

    def start_move(self, start: Cell, end: Cell) -> None:
        if self.tween is not None:
            self.tween.snap()
        self.tween = MoveTween(start, end, self.move_duration, self.easing)
        self.run_cycle.step()

    def buffer(self, direction: Direction) -> None:
        self.pending = direction

    def take_pending(self) -> Optional[Direction]:
        direction, self.pending = self.pending, None
        return direction

    def update(self, dt: float) -> bool:
        """
        Advance the tween and running cycle.

        Returns:
            True on the frame the current move finishes
        """
        if self.tween is None:
            return False

        self.tween.update(dt)
        self.run_cycle.update(dt, moving=not self.tween.finished)
        if self.tween.finished:
            self._position = self.tween.position
            self.tween = None
            return True
        return False

    def place(self, cell: Cell) -> None:
        """Put the player on a cell without animating."""
        self.tween = None
        self.pending = None
        self._position = Vector2.from_grid(*cell)
        self.run_cycle.reset()

    def pixel_position(self, tile_size: int) -> Tuple[int, int]:
        pos = self.position
        return (int(round(pos.x * tile_size)), int(round(pos.y * tile_size)))
