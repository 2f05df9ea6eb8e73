"""Connected same-colour search over the grid."""
from __future__ import annotations

from collections import deque

from tick_physics import vec

from tick_bubble.grid import GridModel


def find_matches(
    grid: GridModel, origin_id: int, color: str, epsilon: float = 0.0
) -> frozenset[int]:
    """Flood-fill from ``origin_id`` across settled bubbles of ``color``.

    Two bubbles are adjacent when their centres are within
    ``cell_size + epsilon``. The origin is always part of the result.
    Each bubble is visited at most once, so cycles terminate.
    Raises KeyError if the origin is not on the grid.
    """
    origin = grid.get(origin_id)
    reach_sq = (grid.cell_size + epsilon) ** 2
    candidates = [
        b for b in grid.settled() if b.color == color and b.id != origin_id
    ]

    visited: set[int] = {origin_id}
    frontier: deque[tuple[float, float]] = deque([(origin.x, origin.y)])
    while frontier:
        pos = frontier.popleft()
        for bubble in candidates:
            if bubble.id in visited:
                continue
            if vec.distance_sq(pos, (bubble.x, bubble.y)) <= reach_sq:
                visited.add(bubble.id)
                frontier.append((bubble.x, bubble.y))
    return frozenset(visited)
