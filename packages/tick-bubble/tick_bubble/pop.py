"""PopAnimator - timed shrink/fade of matched bubbles before removal."""
from __future__ import annotations

from dataclasses import dataclass

from tick_tween import resolve

from tick_bubble.components import AnimState
from tick_bubble.grid import GridModel


@dataclass
class PopGroup:
    """One matched set sharing a start time (ms on the engine clock)."""

    ids: frozenset[int]
    start_ms: float
    progress: float = 0.0


class PopAnimator:
    def __init__(self, duration_ms: float, easing: str = "linear") -> None:
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be > 0, got {duration_ms}")
        self._duration_ms = duration_ms
        self._easing = resolve(easing)
        self._groups: list[PopGroup] = []

    @property
    def active(self) -> int:
        return len(self._groups)

    def groups(self) -> list[PopGroup]:
        return list(self._groups)

    def schedule(self, grid: GridModel, ids: frozenset[int], now_ms: float) -> PopGroup:
        """Mark ``ids`` as popping from ``now_ms``. They stay on the grid until done."""
        for bubble_id in ids:
            bubble = grid.get(bubble_id)
            bubble.anim_state = AnimState.POPPING
            bubble.popping_progress = 0.0
        group = PopGroup(ids=frozenset(ids), start_ms=now_ms)
        self._groups.append(group)
        return group

    def update(self, grid: GridModel, now_ms: float) -> list[PopGroup]:
        """Advance every group to ``now_ms``; prune and return the finished ones."""
        finished: list[PopGroup] = []
        for group in list(self._groups):
            progress = (now_ms - group.start_ms) / self._duration_ms
            group.progress = min(max(progress, 0.0), 1.0)
            for bubble_id in group.ids:
                if bubble_id in grid:
                    grid.get(bubble_id).popping_progress = group.progress
            if group.progress >= 1.0:
                grid.prune(group.ids)
                self._groups.remove(group)
                finished.append(group)
        return finished

    def scale(self, progress: float) -> float:
        """Render scale (and alpha) for a popping bubble at ``progress``."""
        return 1.0 - self._easing(min(max(progress, 0.0), 1.0))

    def clear(self) -> None:
        """Drop in-flight animations without pruning anything."""
        self._groups.clear()
