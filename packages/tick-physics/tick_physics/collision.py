"""Pure collision detection functions. N-dimensional."""
from __future__ import annotations

import math

from tick_physics.vec import Vec


def circle_vs_circle(
    pos_a: Vec,
    radius_a: float,
    pos_b: Vec,
    radius_b: float,
) -> tuple[Vec, float] | None:
    """Detect circle/sphere overlap. Returns (normal A→B, depth) or None.

    Touching circles (distance equal to the radius sum) do not collide.
    """
    dist_sq = sum((a - b) ** 2 for a, b in zip(pos_a, pos_b, strict=True))
    r_sum = radius_a + radius_b
    if dist_sq >= r_sum * r_sum:
        return None
    dist = math.sqrt(dist_sq)
    if dist == 0.0:
        # Coincident centers: pick the first axis.
        normal = tuple(1.0 if i == 0 else 0.0 for i in range(len(pos_a)))
        return normal, r_sum
    inv_dist = 1.0 / dist
    normal = tuple((b - a) * inv_dist for a, b in zip(pos_a, pos_b, strict=True))
    return normal, r_sum - dist
