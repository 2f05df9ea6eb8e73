"""tick-bubble - Bubble-shooter match-3 simulation built on the tick engine."""
from __future__ import annotations

from tick_bubble.components import AimVector, AnimState, Bubble, Phase, Projectile
from tick_bubble.config import DEFAULT_PALETTE, BubbleConfig
from tick_bubble.game import BubbleGame, GameState
from tick_bubble.grid import GridModel, cell_center, cell_of
from tick_bubble.match import find_matches
from tick_bubble.pop import PopAnimator, PopGroup
from tick_bubble.projectile import Landing, Outcome, land, snap_to_cell, step_projectile
from tick_bubble.snapshot import BubbleView, GameView, ProjectileView
from tick_bubble.spawn import SpawnGenerator

__all__ = [
    "AimVector",
    "AnimState",
    "Bubble",
    "BubbleConfig",
    "BubbleGame",
    "BubbleView",
    "DEFAULT_PALETTE",
    "GameState",
    "GameView",
    "GridModel",
    "Landing",
    "Outcome",
    "Phase",
    "PopAnimator",
    "PopGroup",
    "Projectile",
    "ProjectileView",
    "SpawnGenerator",
    "cell_center",
    "cell_of",
    "find_matches",
    "land",
    "snap_to_cell",
    "step_projectile",
]
