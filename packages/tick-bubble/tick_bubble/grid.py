"""GridModel - the set of settled and popping bubbles, keyed by id."""
from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator

from tick_bubble.components import Bubble


def cell_of(x: float, y: float, cell_size: float) -> tuple[int, int]:
    """Return the (row, col) of the lattice cell nearest to a pixel position."""
    half = cell_size / 2
    return round((y - half) / cell_size), round((x - half) / cell_size)


def cell_center(row: int, col: int, cell_size: float) -> tuple[float, float]:
    """Return the pixel (x, y) of a lattice cell centre."""
    half = cell_size / 2
    return col * cell_size + half, row * cell_size + half


class GridModel:
    def __init__(self, cell_size: float) -> None:
        self._cell_size = cell_size
        self._bubbles: dict[int, Bubble] = {}

    @property
    def cell_size(self) -> float:
        return self._cell_size

    def __len__(self) -> int:
        return len(self._bubbles)

    def __iter__(self) -> Iterator[Bubble]:
        return iter(list(self._bubbles.values()))

    def __contains__(self, bubble_id: object) -> bool:
        return bubble_id in self._bubbles

    def get(self, bubble_id: int) -> Bubble:
        bubble = self._bubbles.get(bubble_id)
        if bubble is None:
            raise KeyError(f"Bubble {bubble_id} is not on the grid")
        return bubble

    def append(self, bubble: Bubble) -> None:
        """Add a bubble. The caller guarantees the id and cell are free."""
        self._bubbles[bubble.id] = bubble

    def advance(self, new_row: Iterable[Bubble]) -> GridModel:
        """Shift every existing bubble down one cell, then add ``new_row`` on top."""
        for bubble in self._bubbles.values():
            bubble.y += self._cell_size
        for bubble in new_row:
            self._bubbles[bubble.id] = bubble
        return self

    def breaches_line(self, paddle_y: float) -> bool:
        """True if any settled bubble's lower edge reaches ``paddle_y``."""
        half = self._cell_size / 2
        return any(
            b.y + half >= paddle_y for b in self._bubbles.values() if b.settled
        )

    def prune(self, ids: Iterable[int]) -> None:
        for bubble_id in ids:
            self._bubbles.pop(bubble_id, None)

    def clear(self) -> None:
        self._bubbles.clear()

    def settled(self) -> list[Bubble]:
        return [b for b in self._bubbles.values() if b.settled]

    def snapshot(self) -> list[Bubble]:
        """Copies of every bubble, in insertion order."""
        return [dataclasses.replace(b) for b in self._bubbles.values()]

    def occupied_cells(self) -> set[tuple[int, int]]:
        """(row, col) of every settled bubble."""
        return {
            cell_of(b.x, b.y, self._cell_size)
            for b in self._bubbles.values()
            if b.settled
        }
