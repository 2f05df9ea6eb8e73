"""ProjectileController - integrate, bounce, collide, and land the shot."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from tick_physics import vec
from tick_physics.collision import circle_vs_circle

from tick_bubble.components import Bubble, Projectile
from tick_bubble.config import BubbleConfig
from tick_bubble.grid import GridModel, cell_center, cell_of
from tick_bubble.match import find_matches
from tick_bubble.spawn import SpawnGenerator

logger = logging.getLogger(__name__)

_NEIGHBOURHOOD = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class Outcome(Enum):
    FLYING = "flying"
    HIT = "hit"
    MISSED = "missed"


@dataclass(frozen=True)
class Landing:
    """Result of settling a projectile into the grid."""

    bubble: Bubble
    row: int
    col: int
    matches: frozenset[int]
    displaced: bool = False


def _reflect(projectile: Projectile, config: BubbleConfig) -> None:
    half = config.half_size
    right = config.canvas_width - half
    if projectile.x < half:
        projectile.x = half
        projectile.vx = abs(projectile.vx)
    elif projectile.x > right:
        projectile.x = right
        projectile.vx = -abs(projectile.vx)
    # Ceiling bounces; only the grid can stop a shot.
    if projectile.y < half:
        projectile.y = half
        projectile.vy = abs(projectile.vy)


def nearest_hit(
    projectile: Projectile, grid: GridModel, config: BubbleConfig
) -> Bubble | None:
    """Closest settled bubble nearer than ``cell_size - epsilon``, if any."""
    radius = (config.cell_size - config.collision_epsilon) / 2
    pos = (projectile.x, projectile.y)
    best: Bubble | None = None
    best_sq = float("inf")
    for bubble in grid.settled():
        other = (bubble.x, bubble.y)
        if circle_vs_circle(pos, radius, other, radius) is None:
            continue
        dist_sq = vec.distance_sq(pos, other)
        if dist_sq < best_sq:
            best, best_sq = bubble, dist_sq
    return best


def step_projectile(
    projectile: Projectile, grid: GridModel, config: BubbleConfig
) -> Outcome:
    """Advance the projectile one fixed tick.

    Moves by its velocity, reflects off the side walls and ceiling, then
    reports whether it touched the grid or left the bottom of the field.
    """
    projectile.x += projectile.vx
    projectile.y += projectile.vy
    _reflect(projectile, config)

    if nearest_hit(projectile, grid, config) is not None:
        return Outcome.HIT
    if projectile.y > config.canvas_height + config.cell_size:
        return Outcome.MISSED
    return Outcome.FLYING


def snap_to_cell(x: float, y: float, config: BubbleConfig) -> tuple[int, int]:
    """Nearest in-bounds lattice cell (row, col) to a pixel position."""
    row, col = cell_of(x, y, config.cell_size)
    col = min(max(col, 0), config.columns - 1)
    return max(row, 0), col


def landing_cell(
    projectile: Projectile, grid: GridModel, config: BubbleConfig
) -> tuple[int, int] | None:
    """Cell the projectile settles into.

    The snapped cell when free; otherwise the free neighbour closest to the
    projectile centre (ties by row, then column). None when boxed in.
    """
    row, col = snap_to_cell(projectile.x, projectile.y, config)
    occupied = grid.occupied_cells()
    if (row, col) not in occupied:
        return row, col

    pos = (projectile.x, projectile.y)
    candidates: list[tuple[float, int, int]] = []
    for dr, dc in _NEIGHBOURHOOD:
        r, c = row + dr, col + dc
        if r < 0 or not 0 <= c < config.columns or (r, c) in occupied:
            continue
        dist_sq = vec.distance_sq(pos, cell_center(r, c, config.cell_size))
        candidates.append((dist_sq, r, c))
    if not candidates:
        return None
    _, r, c = min(candidates)
    return r, c


def land(
    projectile: Projectile,
    grid: GridModel,
    config: BubbleConfig,
    spawner: SpawnGenerator,
) -> Landing | None:
    """Settle the projectile into the grid and search for its colour group.

    Returns None when no free cell is reachable; the grid is untouched.
    """
    cell = landing_cell(projectile, grid, config)
    if cell is None:
        logger.debug(
            "no free cell near (%.1f, %.1f); shot discarded", projectile.x, projectile.y
        )
        return None
    row, col = cell
    displaced = cell != snap_to_cell(projectile.x, projectile.y, config)
    x, y = cell_center(row, col, config.cell_size)
    bubble = spawner.bubble(x, y, projectile.color)
    grid.append(bubble)
    matches = find_matches(grid, bubble.id, bubble.color, config.collision_epsilon)
    logger.debug(
        "landed %s at row=%d col=%d (displaced=%s), group of %d",
        bubble.color, row, col, displaced, len(matches),
    )
    return Landing(bubble=bubble, row=row, col=col, matches=matches, displaced=displaced)
