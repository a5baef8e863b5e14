"""
Grid World - Game Logic Environment
===================================

Headless state for the pathfinding game: the level grid, the player's
position and the win condition. No graphics here, just logic.

Levels come from the built-in default (20x15 with a short obstacle bar) or
from an ASCII layout:

    ....................
    .S..................
    ...####.............
    ..................G.

    '.' free, '#' obstacle, 'S' start, 'G' goal
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence, Union

import numpy as np

from pathgame.core.definitions import (
    Cell,
    TileID,
    Direction,
    CHAR_TO_TILE,
    START_CHAR,
    GOAL_CHAR,
    DIRECTION_DELTAS,
    SEARCH_DELTAS,
    GRID_WIDTH,
    GRID_HEIGHT,
    DEFAULT_START,
    DEFAULT_GOAL,
    DEFAULT_OBSTACLES,
)

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Raised when a level layout is malformed."""


@dataclass
class MoveResult:
    """Outcome of a single move attempt."""
    moved: bool
    position: Cell
    won: bool = False
    reason: str = ''


class GridWorld:
    """
    Discrete state for the grid game.

    Handles:
    - Bounds and obstacle collision
    - Player position and move counting
    - Win condition (player standing on the goal)
    """

    def __init__(self, grid: np.ndarray, start: Cell, goal: Cell):
        """
        Args:
            grid: 2D int array of TileID values, shape (rows, cols)
            start: (row, col) of the player's starting cell
            goal: (row, col) of the goal cell

        Raises:
            LayoutError: if start or goal is out of bounds or blocked
        """
        self.grid = np.array(grid, dtype=np.int64)
        if self.grid.ndim != 2 or self.grid.size == 0:
            raise LayoutError(f"Grid must be a non-empty 2D array, got shape {self.grid.shape}")
        self.height, self.width = self.grid.shape
        self.start: Cell = (int(start[0]), int(start[1]))
        self.goal: Cell = (int(goal[0]), int(goal[1]))

        for name, cell in (('start', self.start), ('goal', self.goal)):
            if not self.in_bounds(cell):
                raise LayoutError(f"{name} {cell} is outside the {self.height}x{self.width} grid")
            if not self.is_walkable(cell):
                raise LayoutError(f"{name} {cell} is on an obstacle")

        self.position: Cell = self.start
        self.won = False
        self.moves = 0

        logger.debug("GridWorld %dx%d start=%s goal=%s obstacles=%d",
                     self.height, self.width, self.start, self.goal, self.obstacle_count)

    # ==========================================
    # CONSTRUCTORS
    # ==========================================

    @classmethod
    def default(cls) -> 'GridWorld':
        """The built-in 20x15 level."""
        grid = np.full((GRID_HEIGHT, GRID_WIDTH), TileID.FREE, dtype=np.int64)
        for r, c in DEFAULT_OBSTACLES:
            grid[r, c] = TileID.OBSTACLE
        return cls(grid, DEFAULT_START, DEFAULT_GOAL)

    @classmethod
    def from_layout(cls, text: str) -> 'GridWorld':
        """
        Parse an ASCII layout.

        Blank lines and trailing whitespace are ignored. All rows must have
        the same width and the layout must contain exactly one start and one
        goal.

        Raises:
            LayoutError: describing the first problem found
        """
        rows = [line.rstrip() for line in text.splitlines()]
        rows = [line for line in rows if line]
        if not rows:
            raise LayoutError("Layout is empty")

        width = len(rows[0])
        grid = np.full((len(rows), width), TileID.FREE, dtype=np.int64)
        starts: List[Cell] = []
        goals: List[Cell] = []

        for r, line in enumerate(rows):
            if len(line) != width:
                raise LayoutError(f"Row {r} has width {len(line)}, expected {width}: {line!r}")
            for c, ch in enumerate(line):
                if ch not in CHAR_TO_TILE:
                    raise LayoutError(f"Row {r} has unknown character {ch!r} at column {c}")
                grid[r, c] = CHAR_TO_TILE[ch]
                if ch == START_CHAR:
                    starts.append((r, c))
                elif ch == GOAL_CHAR:
                    goals.append((r, c))

        if len(starts) != 1:
            raise LayoutError(f"Layout needs exactly one '{START_CHAR}', found {len(starts)}")
        if len(goals) != 1:
            raise LayoutError(f"Layout needs exactly one '{GOAL_CHAR}', found {len(goals)}")

        return cls(grid, starts[0], goals[0])

    @classmethod
    def load_layout(cls, path: Union[str, Path]) -> 'GridWorld':
        """Read and parse a layout file."""
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise LayoutError(f"{path} is not valid UTF-8: {e}") from e
        world = cls.from_layout(text)
        logger.info("Loaded layout %s (%dx%d)", path, world.width, world.height)
        return world

    # ==========================================
    # QUERIES
    # ==========================================

    @property
    def obstacle_count(self) -> int:
        return int(np.count_nonzero(self.grid == TileID.OBSTACLE))

    def obstacles(self) -> List[Cell]:
        """All obstacle cells in row-major order."""
        rows, cols = np.where(self.grid == TileID.OBSTACLE)
        return list(zip(rows.tolist(), cols.tolist()))

    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.height and 0 <= c < self.width

    def is_walkable(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and self.grid[cell[0], cell[1]] != TileID.OBSTACLE

    def neighbors(self, cell: Cell, deltas: Sequence[Cell] = SEARCH_DELTAS) -> Iterator[Cell]:
        """Yield walkable 4-connected neighbors of a cell."""
        r, c = cell
        for dr, dc in deltas:
            nxt = (r + dr, c + dc)
            if self.is_walkable(nxt):
                yield nxt

    # ==========================================
    # ACTIONS
    # ==========================================

    def target_of(self, direction: Direction) -> Cell:
        dr, dc = DIRECTION_DELTAS[Direction(direction)]
        return (self.position[0] + dr, self.position[1] + dc)

    def try_move(self, direction: Direction) -> MoveResult:
        """
        Attempt to move the player one cell.

        Moves are ignored once the game is won. Out-of-bounds and obstacle
        targets leave the position unchanged.
        """
        if self.won:
            return MoveResult(False, self.position, True, 'won')

        target = self.target_of(direction)
        if not self.in_bounds(target):
            return MoveResult(False, self.position, False, 'out_of_bounds')
        if not self.is_walkable(target):
            return MoveResult(False, self.position, False, 'blocked')

        self.position = target
        self.moves += 1
        if target == self.goal:
            self.won = True
            logger.info("Goal reached in %d moves", self.moves)

        return MoveResult(True, self.position, self.won, 'goal' if self.won else '')

    def reset(self) -> Cell:
        """Put the player back on the start cell."""
        self.position = self.start
        self.won = False
        self.moves = 0
        return self.position

    def to_layout(self) -> str:
        """Render the level back to the ASCII layout format."""
        lines = []
        for r in range(self.height):
            chars = []
            for c in range(self.width):
                if (r, c) == self.start:
                    chars.append(START_CHAR)
                elif (r, c) == self.goal:
                    chars.append(GOAL_CHAR)
                elif self.grid[r, c] == TileID.OBSTACLE:
                    chars.append('#')
                else:
                    chars.append('.')
            lines.append(''.join(chars))
        return '\n'.join(lines) + '\n'

    def __repr__(self) -> str:
        return (f"GridWorld({self.height}x{self.width}, position={self.position}, "
                f"goal={self.goal}, won={self.won})")
