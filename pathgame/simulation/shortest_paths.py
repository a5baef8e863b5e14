"""
Shortest-path precomputation.

A single Dijkstra search seeded at the goal labels every reachable cell with
its distance to the goal and the neighbor one step closer to it. With unit
edge costs this visits cells in breadth-first order. Obstacles never move, so
the field is computed once per level and read on every frame to draw the
remaining path from the player's cell.
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from pathgame.core.definitions import Cell
from pathgame.simulation.grid_world import GridWorld

logger = logging.getLogger(__name__)

UNREACHABLE = -1


@dataclass
class ShortestPathField:
    """
    Distances to the goal and next-step links for every reachable cell.

    Attributes:
        goal: The cell the search was seeded at
        distance: int array, steps to the goal (UNREACHABLE if none)
        previous: cell -> neighbor one step closer to the goal
        nodes_expanded: cells popped from the queue (diagnostic)
    """
    goal: Cell
    distance: np.ndarray
    previous: Dict[Cell, Cell] = field(default_factory=dict)
    nodes_expanded: int = 0

    def distance_to_goal(self, cell: Cell) -> Optional[int]:
        r, c = cell
        rows, cols = self.distance.shape
        if not (0 <= r < rows and 0 <= c < cols):
            return None
        d = int(self.distance[r, c])
        return None if d == UNREACHABLE else d

    def is_reachable(self, cell: Cell) -> bool:
        return self.distance_to_goal(cell) is not None

    def next_step(self, cell: Cell) -> Optional[Cell]:
        return self.previous.get(cell)

    def path_from(self, cell: Cell) -> List[Cell]:
        """
        Remaining path from a cell to the goal.

        The cell itself is excluded and the goal is the last element. The
        goal and unreachable cells give an empty path.
        """
        path = []
        current = self.previous.get(cell)
        while current is not None:
            path.append(current)
            current = self.previous.get(current)
        return path

    def reachable_count(self) -> int:
        return int(np.count_nonzero(self.distance != UNREACHABLE))

    def format_table(self) -> str:
        """Distance grid as text, '.' for obstacles and unreachable cells."""
        width = max(2, len(str(int(self.distance.max()))))
        lines = []
        for row in self.distance:
            cells = []
            for d in row:
                cells.append(str(int(d)).rjust(width) if d != UNREACHABLE else '.'.rjust(width))
            lines.append(' '.join(cells))
        return '\n'.join(lines)


def compute_shortest_paths(world: GridWorld) -> ShortestPathField:
    """
    Run Dijkstra from the goal over the 4-connected walkable cells.

    Args:
        world: Level to search; only its grid and goal are read

    Returns:
        ShortestPathField covering every cell reachable from the goal
    """
    distance = np.full((world.height, world.width), UNREACHABLE, dtype=np.int64)
    previous: Dict[Cell, Cell] = {}
    goal = world.goal

    distance[goal] = 0
    open_heap = [(0, goal)]
    nodes_expanded = 0

    while open_heap:
        dist, node = heapq.heappop(open_heap)
        if dist > distance[node]:
            continue  # stale entry
        nodes_expanded += 1

        for nb in world.neighbors(node):
            new_dist = dist + 1
            known = distance[nb]
            if known == UNREACHABLE or new_dist < known:
                distance[nb] = new_dist
                previous[nb] = node
                heapq.heappush(open_heap, (new_dist, nb))

    result = ShortestPathField(goal=goal, distance=distance, previous=previous,
                               nodes_expanded=nodes_expanded)
    logger.info("Shortest paths from goal %s: %d reachable cells, %d expanded",
                goal, result.reachable_count(), nodes_expanded)
    return result
