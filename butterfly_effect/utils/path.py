"""Reachability over the free-cell graph.

The graph is implicit: nodes are the free cells of a :class:`GridState` and
edges join axis-adjacent free cells with unit weight. Because every edge
weighs the same, a breadth-first search yields uniform-cost shortest paths.
Each query visits a cell at most once and stops as soon as any target is
dequeued.
"""

from collections import deque
from typing import Dict, Iterable, Optional

from butterfly_effect.components import Position
from butterfly_effect.grid import GridState
from butterfly_effect.utils.grid import free_neighbors


def bfs_distances(
    grid: GridState,
    start: Position,
    targets: Optional[Iterable[Position]] = None,
) -> Dict[Position, int]:
    """Breadth-first distances from ``start`` over free cells.

    Args:
        grid: Obstacle layout to search.
        start: Source cell. A non-free source reaches nothing.
        targets: Optional early-exit set; the search stops once any of them
            is reached.

    Returns:
        Dict[Position, int]: Distance of every cell settled before the search
            ended (``start`` maps to 0).
    """
    if not grid.is_free(start):
        return {}
    goal_set = set(targets) if targets is not None else set()
    distances: Dict[Position, int] = {start: 0}
    queue: deque[Position] = deque([start])
    while queue:
        pos = queue.popleft()
        if pos in goal_set:
            break
        for neighbor in free_neighbors(grid, pos):
            if neighbor not in distances:
                distances[neighbor] = distances[pos] + 1
                queue.append(neighbor)
    return distances


def shortest_distance(
    grid: GridState, start: Position, goal: Position
) -> Optional[int]:
    """Number of steps on a shortest path, or ``None`` if unreachable."""
    return bfs_distances(grid, start, [goal]).get(goal)


def first_reachable_goal(
    grid: GridState, start: Position, goals: Iterable[Position]
) -> Optional[Position]:
    """Return the closest goal reachable from ``start`` or ``None``.

    Ties between equally distant goals are broken by the lowest ``y``, then
    the lowest ``x``.
    """
    goal_list = list(goals)
    if not goal_list:
        return None
    distances = bfs_distances(grid, start, goal_list)
    reached = [goal for goal in goal_list if goal in distances]
    if not reached:
        return None
    return min(reached, key=lambda goal: (distances[goal], goal.y, goal.x))
