"""tick-tween - Easing curves for time-based animation."""
from __future__ import annotations

from tick_tween.easing import EASINGS, Easing, resolve

__all__ = ["EASINGS", "Easing", "resolve"]
