"""SpawnGenerator - random colours, projectiles, and grid rows."""
from __future__ import annotations

import itertools
import random

from tick_bubble.components import Bubble, Projectile


class SpawnGenerator:
    """Produces fresh bubbles and projectiles.

    Holds a one-colour lookahead (``next_color``) so the host can preview
    the shot after the current one.
    """

    def __init__(self, palette: tuple[str, ...], rng: random.Random) -> None:
        if not palette:
            raise ValueError("palette must be non-empty")
        self._palette = tuple(palette)
        self._rng = rng
        self._ids = itertools.count()
        self._next_color = self.random_color()

    @property
    def next_color(self) -> str:
        return self._next_color

    def random_color(self) -> str:
        return self._rng.choice(self._palette)

    def new_id(self) -> int:
        return next(self._ids)

    def bubble(self, x: float, y: float, color: str) -> Bubble:
        return Bubble(id=self.new_id(), x=x, y=y, color=color)

    def spawn_projectile(self, spawn_x: float, spawn_y: float) -> Projectile:
        """A resting projectile carrying the previewed colour."""
        color = self._next_color
        self._next_color = self.random_color()
        return Projectile(x=spawn_x, y=spawn_y, vx=0.0, vy=0.0, color=color)

    def spawn_row(self, width: float, cell_size: float) -> list[Bubble]:
        """One full-width row of independently coloured bubbles in the top cell row."""
        half = cell_size / 2
        columns = int(width // cell_size)
        return [
            self.bubble(col * cell_size + half, half, self.random_color())
            for col in range(columns)
        ]
