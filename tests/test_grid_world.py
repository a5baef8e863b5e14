"""
Tests for GridWorld movement rules and layout parsing.
"""

from pathlib import Path

import numpy as np
import pytest

from pathgame.core.definitions import (
    TileID,
    Direction,
    DEFAULT_START,
    DEFAULT_GOAL,
    DEFAULT_OBSTACLES,
    GRID_WIDTH,
    GRID_HEIGHT,
)
from pathgame.simulation.grid_world import GridWorld, LayoutError

LEVELS_DIR = Path(__file__).resolve().parent.parent / 'levels'


def test_default_level_matches_constants():
    world = GridWorld.default()
    assert world.grid.shape == (GRID_HEIGHT, GRID_WIDTH)
    assert world.start == DEFAULT_START
    assert world.goal == DEFAULT_GOAL
    assert world.position == DEFAULT_START
    assert world.obstacles() == DEFAULT_OBSTACLES
    assert world.obstacle_count == 4
    assert not world.won


def test_move_into_free_cell():
    world = GridWorld.default()
    result = world.try_move(Direction.RIGHT)
    assert result.moved
    assert result.position == (1, 2)
    assert world.position == (1, 2)
    assert world.moves == 1


def test_move_out_of_bounds_is_rejected():
    world = GridWorld.default()
    assert world.try_move(Direction.UP).moved
    result = world.try_move(Direction.UP)
    assert not result.moved
    assert result.reason == 'out_of_bounds'
    assert world.position == (0, 1)
    assert world.moves == 1


def test_move_into_obstacle_is_rejected():
    world = GridWorld.default()
    world.position = (2, 3)
    result = world.try_move(Direction.DOWN)
    assert not result.moved
    assert result.reason == 'blocked'
    assert world.position == (2, 3)


def test_reaching_goal_wins_and_freezes_input():
    world = GridWorld.from_layout("S.G\n")
    assert not world.try_move(Direction.RIGHT).won
    result = world.try_move(Direction.RIGHT)
    assert result.won
    assert world.won
    assert world.position == world.goal

    after = world.try_move(Direction.LEFT)
    assert not after.moved
    assert after.reason == 'won'
    assert world.position == world.goal


def test_reset_restores_start():
    world = GridWorld.from_layout("SG\n")
    world.try_move(Direction.RIGHT)
    assert world.won

    assert world.reset() == world.start
    assert not world.won
    assert world.moves == 0


def test_neighbors_skip_obstacles_and_edges():
    world = GridWorld.default()
    assert set(world.neighbors((0, 0))) == {(1, 0), (0, 1)}
    # (2, 3) sits above the obstacle bar
    assert (3, 3) not in set(world.neighbors((2, 3)))


def test_from_layout_parses_tiles():
    world = GridWorld.from_layout("""
        S.#
        ..G
    """.replace('        ', ''))
    assert world.grid.shape == (2, 3)
    assert world.start == (0, 0)
    assert world.goal == (1, 2)
    assert world.grid[0, 2] == TileID.OBSTACLE
    assert world.grid[1, 0] == TileID.FREE


@pytest.mark.parametrize("text,fragment", [
    ("", "empty"),
    ("S..\n.G\n", "width"),
    ("S.x\n..G\n", "unknown character"),
    ("S.S\n..G\n", "exactly one 'S'"),
    ("S..\n...\n", "exactly one 'G'"),
])
def test_from_layout_rejects_malformed_text(text, fragment):
    with pytest.raises(LayoutError, match=fragment):
        GridWorld.from_layout(text)


def test_start_on_obstacle_is_rejected():
    grid = np.zeros((2, 2), dtype=np.int64)
    grid[0, 0] = TileID.OBSTACLE
    with pytest.raises(LayoutError, match="start"):
        GridWorld(grid, (0, 0), (1, 1))


def test_goal_out_of_bounds_is_rejected():
    grid = np.zeros((2, 2), dtype=np.int64)
    with pytest.raises(LayoutError, match="goal"):
        GridWorld(grid, (0, 0), (5, 5))


def test_load_layout_from_file(tmp_path):
    path = tmp_path / 'level.txt'
    path.write_text("S.\n#G\n", encoding='utf-8')
    world = GridWorld.load_layout(path)
    assert world.obstacles() == [(1, 0)]
    assert world.to_layout() == "S.\n#G\n"


def test_shipped_layout_loads():
    world = GridWorld.load_layout(LEVELS_DIR / 'corridor.txt')
    assert world.grid.shape == (GRID_HEIGHT, GRID_WIDTH)
    assert world.start == (1, 1)
    assert world.goal == (13, 18)
    assert world.obstacle_count > 0


def test_load_layout_rejects_non_utf8(tmp_path):
    path = tmp_path / 'level.txt'
    path.write_bytes(b"S\xff\xfeG\n")
    with pytest.raises(LayoutError, match="not valid UTF-8"):
        GridWorld.load_layout(path)
