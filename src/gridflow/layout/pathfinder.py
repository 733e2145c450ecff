"""A* pathfinder for edge routing on the layout grid."""

from __future__ import annotations

import heapq
from collections.abc import Callable

from gridflow.layout.types import GridCoord, heading_between


def _heuristic(a: GridCoord, b: GridCoord) -> int:
    """Manhattan distance + corner penalty."""
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    if dx == 0 or dy == 0:
        return dx + dy
    return dx + dy + 1


# 4-directional neighbors: right, left, down, up
_DIRS = [(1, 0), (-1, 0), (0, 1), (0, -1)]


def a_star(start: GridCoord, goal: GridCoord, is_free: Callable[[GridCoord], bool]) -> list[GridCoord] | None:
    """Find a shortest path from start to goal, stepping only onto free cells.

    The goal cell is allowed to be blocked (it's on a node border).
    Returns the cells from start to goal inclusive, or None once the
    frontier is exhausted without reaching the goal.
    """
    # Priority queue: (priority, counter, coord)
    counter = 0
    open_set: list[tuple[int, int, GridCoord]] = [(0, counter, start)]

    cost_so_far: dict[GridCoord, int] = {start: 0}
    came_from: dict[GridCoord, GridCoord | None] = {start: None}

    while open_set:
        _, _, current = heapq.heappop(open_set)

        if current == goal:
            path: list[GridCoord] = []
            cur: GridCoord | None = current
            while cur is not None:
                path.append(cur)
                cur = came_from[cur]
            path.reverse()
            return path

        current_cost = cost_so_far[current]

        for dx, dy in _DIRS:
            nxt = GridCoord(current.x + dx, current.y + dy)

            if nxt != goal and not is_free(nxt):
                continue

            new_cost = current_cost + 1
            if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                cost_so_far[nxt] = new_cost
                counter += 1
                heapq.heappush(open_set, (new_cost + _heuristic(nxt, goal), counter, nxt))
                came_from[nxt] = current

    return None


def simplify_path(path: list[GridCoord]) -> list[GridCoord]:
    """Drop every point whose incoming and outgoing headings match."""
    if len(path) <= 2:
        return list(path)

    result = [path[0]]
    for prev, curr, nxt in zip(path, path[1:], path[2:]):
        if heading_between(prev, curr) != heading_between(curr, nxt):
            result.append(curr)
    result.append(path[-1])
    return result
