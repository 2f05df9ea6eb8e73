"""Immutable per-frame views of the game for rendering."""
from __future__ import annotations

from dataclasses import dataclass

from tick_bubble.components import AnimState, Phase


@dataclass(frozen=True)
class BubbleView:
    id: int
    x: float
    y: float
    color: str
    state: AnimState
    progress: float
    scale: float
    alpha: float


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    vx: float
    vy: float
    color: str


@dataclass(frozen=True)
class GameView:
    """Everything a renderer needs for one frame. Never mutated."""

    phase: Phase
    tick_number: int
    bubbles: tuple[BubbleView, ...]
    projectile: ProjectileView | None
    loaded_color: str | None
    next_color: str | None
    aim: tuple[float, float] | None
    popped_count: int
    win_threshold: int
    loss_line: float
    row_countdown: int | None = None

    @property
    def won(self) -> bool:
        return self.phase is Phase.WIN

    @property
    def lost(self) -> bool:
        return self.phase is Phase.GAME_OVER
