"""Tests for Periodic component and make_periodic_system."""
from tick import Engine

from tick_schedule import Periodic, make_periodic_system


def _engine(fired: list) -> Engine:
    engine = Engine(tps=20, seed=42)

    def on_fire(w, ctx, eid, periodic):
        fired.append(ctx.tick_number)

    engine.add_system(make_periodic_system(on_fire))
    return engine


class TestPeriodic:
    """Recurring timer behaviour."""

    def test_fires_every_interval(self):
        """Periodic(interval=3) fires at ticks 3, 6, 9."""
        fired = []
        engine = _engine(fired)
        eid = engine.world.spawn()
        engine.world.attach(eid, Periodic(name="row_growth", interval=3))
        engine.run(10)
        assert fired == [3, 6, 9]

    def test_stays_attached(self):
        """Periodic is never auto-detached."""
        fired = []
        engine = _engine(fired)
        eid = engine.world.spawn()
        engine.world.attach(eid, Periodic(name="p", interval=2))
        engine.run(5)
        assert engine.world.has(eid, Periodic)

    def test_remaining_counts_down(self):
        """remaining reports ticks until the next fire."""
        fired = []
        engine = _engine(fired)
        eid = engine.world.spawn()
        periodic = Periodic(name="p", interval=4)
        engine.world.attach(eid, periodic)
        assert periodic.remaining == 4
        engine.run(3)
        assert periodic.remaining == 1
        engine.step()
        assert periodic.remaining == 4

    def test_detach_pauses_and_reattach_restarts(self):
        """A fresh Periodic starts its count from zero."""
        fired = []
        engine = _engine(fired)
        eid = engine.world.spawn()
        engine.world.attach(eid, Periodic(name="p", interval=5))
        engine.run(4)
        engine.world.detach(eid, Periodic)
        engine.run(20)
        assert fired == []
        engine.world.attach(eid, Periodic(name="p", interval=5))
        engine.run(5)
        assert fired == [29]

    def test_callback_can_detach(self):
        """Detaching inside on_fire stops later fires."""
        engine = Engine(tps=20, seed=42)
        fired = []

        def on_fire(w, ctx, eid, periodic):
            fired.append(ctx.tick_number)
            w.detach(eid, Periodic)

        engine.add_system(make_periodic_system(on_fire))
        eid = engine.world.spawn()
        engine.world.attach(eid, Periodic(name="p", interval=2))
        engine.run(10)
        assert fired == [2]
