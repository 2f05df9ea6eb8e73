"""Timer and Periodic components, counted in engine ticks."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """One-shot countdown. Fires when remaining reaches 0, then auto-detaches."""

    name: str
    remaining: int


@dataclass
class Periodic:
    """Recurring timer. Fires every `interval` ticks while attached.

    Detaching pauses it; attaching a fresh one restarts the count.
    """

    name: str
    interval: int
    elapsed: int = 0

    @property
    def remaining(self) -> int:
        """Ticks left until the next fire."""
        return max(self.interval - self.elapsed, 0)
