"""Tests for Timer component and make_timer_system."""
from tick import Engine

from tick_schedule import Timer, make_timer_system


def _engine(fired: list) -> Engine:
    engine = Engine(tps=20, seed=42)

    def on_fire(w, ctx, eid, timer):
        fired.append((ctx.tick_number, eid, timer.name))

    engine.add_system(make_timer_system(on_fire))
    return engine


class TestTimer:
    """One-shot countdown behaviour."""

    def test_fires_at_correct_tick(self):
        """Timer(remaining=5) fires after exactly 5 ticks."""
        fired = []
        engine = _engine(fired)
        eid = engine.world.spawn()
        engine.world.attach(eid, Timer(name="loading", remaining=5))
        engine.run(4)
        assert fired == []
        engine.step()
        assert fired == [(5, eid, "loading")]

    def test_fires_exactly_once(self):
        """No further calls after the first fire."""
        fired = []
        engine = _engine(fired)
        eid = engine.world.spawn()
        engine.world.attach(eid, Timer(name="once", remaining=3))
        engine.run(10)
        assert [t for t, _, _ in fired] == [3]

    def test_auto_detaches_before_callback(self):
        """The entity has no Timer by the time on_fire runs."""
        engine = Engine(tps=20, seed=42)
        seen = []
        engine.add_system(
            make_timer_system(lambda w, ctx, eid, t: seen.append(w.has(eid, Timer)))
        )
        eid = engine.world.spawn()
        engine.world.attach(eid, Timer(name="t", remaining=1))
        engine.step()
        assert seen == [False]
        assert not engine.world.has(eid, Timer)

    def test_detach_cancels(self):
        """Removing the Timer before zero means it never fires."""
        fired = []
        engine = _engine(fired)
        eid = engine.world.spawn()
        engine.world.attach(eid, Timer(name="cancelled", remaining=5))
        engine.run(2)
        engine.world.detach(eid, Timer)
        engine.run(10)
        assert fired == []

    def test_callback_can_rearm(self):
        """Attaching a new Timer inside on_fire schedules another fire."""
        engine = Engine(tps=20, seed=42)
        fired = []

        def on_fire(w, ctx, eid, timer):
            fired.append(ctx.tick_number)
            if len(fired) < 3:
                w.attach(eid, Timer(name=timer.name, remaining=2))

        engine.add_system(make_timer_system(on_fire))
        eid = engine.world.spawn()
        engine.world.attach(eid, Timer(name="again", remaining=2))
        engine.run(10)
        assert fired == [2, 4, 6]
