"""Bubble, projectile, and aim state."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    LOADING = "loading"
    AIMING = "aiming"
    SHOT = "shot"
    GAME_OVER = "game_over"
    WIN = "win"


class AnimState(Enum):
    SETTLED = "settled"
    POPPING = "popping"


@dataclass
class Bubble:
    """A coloured bubble. Settled bubbles sit on lattice cell centres."""

    id: int
    x: float
    y: float
    color: str
    anim_state: AnimState = AnimState.SETTLED
    popping_progress: float = 0.0

    @property
    def settled(self) -> bool:
        return self.anim_state is AnimState.SETTLED


@dataclass
class Projectile:
    """The single in-flight shot. Velocity is in pixels per tick."""

    x: float
    y: float
    vx: float
    vy: float
    color: str


@dataclass(frozen=True)
class AimVector:
    """Drag direction from the launcher toward the pointer."""

    dx: float
    dy: float
