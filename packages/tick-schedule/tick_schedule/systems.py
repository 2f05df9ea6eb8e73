"""System factories for timer and periodic processing."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_schedule.components import Periodic, Timer

if TYPE_CHECKING:
    from tick import EntityId, TickContext, World


def make_timer_system(
    on_fire: Callable[[World, TickContext, EntityId, Timer], None],
) -> Callable[[World, TickContext], None]:
    """Return a system that decrements Timers and fires callbacks at zero.

    The Timer is detached before ``on_fire`` runs, so the callback may
    attach a new one to re-arm.
    """

    def timer_system(world: World, ctx: TickContext) -> None:
        for eid, (timer,) in list(world.query(Timer)):
            timer.remaining -= 1
            if timer.remaining <= 0:
                world.detach(eid, Timer)
                on_fire(world, ctx, eid, timer)

    return timer_system


def make_periodic_system(
    on_fire: Callable[[World, TickContext, EntityId, Periodic], None],
) -> Callable[[World, TickContext], None]:
    """Return a system that counts Periodic ticks and fires on each interval."""

    def periodic_system(world: World, ctx: TickContext) -> None:
        for eid, (periodic,) in list(world.query(Periodic)):
            periodic.elapsed += 1
            if periodic.elapsed >= periodic.interval:
                periodic.elapsed = 0
                on_fire(world, ctx, eid, periodic)

    return periodic_system
