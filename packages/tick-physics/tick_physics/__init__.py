"""tick-physics - Vector math and circle collision for the tick engine."""
from __future__ import annotations

from tick_physics import vec
from tick_physics.collision import circle_vs_circle

__all__ = ["circle_vs_circle", "vec"]
