"""Fixed-timestep clock producing a TickContext per tick."""

import random

from tick.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_ms(self) -> float:
        return self._tick_number * self._dt * 1000.0

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            random=rng,
        )

    def ticks_for(self, ms: float) -> int:
        """Whole ticks covering ``ms`` milliseconds, never fewer than one."""
        return max(1, round(ms * self._tps / 1000))
