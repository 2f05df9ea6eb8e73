"""Tests for clock advancement and TickContext generation."""

import random

import pytest
from tick.clock import Clock
from tick.types import TickContext

_test_rng = random.Random(0)


def test_clock_initialization():
    """Test clock initializes with correct TPS and dt."""
    clock = Clock(tps=50)
    assert clock.tps == 50
    assert clock.tick_number == 0
    assert abs(clock.dt - 0.02) < 1e-9


def test_invalid_tps_rejected():
    with pytest.raises(ValueError):
        Clock(tps=0)
    with pytest.raises(ValueError):
        Clock(tps=-5)


def test_advance_returns_new_tick_number():
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


def test_context_fields():
    """The context carries tick number, dt, elapsed seconds, and the rng."""
    clock = Clock(tps=20)
    clock.advance()
    clock.advance()
    ctx = clock.context(_test_rng)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 2
    assert ctx.dt == pytest.approx(0.05)
    assert ctx.elapsed == pytest.approx(0.1)
    assert ctx.random is _test_rng


def test_context_is_frozen():
    ctx = Clock(tps=20).context(_test_rng)
    with pytest.raises(AttributeError):
        ctx.tick_number = 5  # type: ignore[misc]


def test_elapsed_ms_matches_context():
    clock = Clock(tps=50)
    for _ in range(15):
        clock.advance()
    assert clock.elapsed_ms == pytest.approx(300.0)
    assert clock.context(_test_rng).elapsed_ms == pytest.approx(300.0)


class TestTicksFor:
    def test_exact_multiple(self):
        clock = Clock(tps=50)
        assert clock.ticks_for(300) == 15
        assert clock.ticks_for(10_000) == 500

    def test_rounds_to_nearest(self):
        clock = Clock(tps=50)
        assert clock.ticks_for(29) == 1
        assert clock.ticks_for(31) == 2

    def test_never_below_one(self):
        clock = Clock(tps=50)
        assert clock.ticks_for(0) == 1
        assert clock.ticks_for(1) == 1

    def test_depends_on_tps(self):
        assert Clock(tps=20).ticks_for(1000) == 20
        assert Clock(tps=60).ticks_for(1000) == 60
