"""Engine - runs registered systems once per fixed tick."""

import logging
import os
import random

from tick.clock import Clock
from tick.types import System
from tick.world import World

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, tps: int = 20, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._world = World()
        self._systems: list[System] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        logger.debug("engine created at %d tps, seed %d", tps, seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self) -> None:
        """Advance the clock one tick and run every system in order."""
        self._clock.advance()
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(self._world, ctx)

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()
