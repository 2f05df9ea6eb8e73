"""tick - A minimal fixed-timestep tick engine."""

from tick.clock import Clock
from tick.engine import Engine
from tick.types import DeadEntityError, EntityId, TickContext
from tick.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "TickContext",
    "EntityId",
    "DeadEntityError",
]
