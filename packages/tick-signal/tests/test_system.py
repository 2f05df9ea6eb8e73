"""Tests for make_signal_system."""
from __future__ import annotations

from tick import Engine

from tick_signal import SignalBus, make_signal_system


class TestSignalSystem:
    def test_flushes_once_per_tick(self) -> None:
        engine = Engine(tps=20, seed=42)
        bus = SignalBus()
        received = []
        bus.subscribe("tick", lambda n, d: received.append(d["n"]))

        def publisher(world, ctx):
            bus.publish("tick", n=ctx.tick_number)

        engine.add_system(publisher)
        engine.add_system(make_signal_system(bus))
        engine.run(3)
        assert received == [1, 2, 3]

    def test_signals_published_between_ticks_flush_next_tick(self) -> None:
        engine = Engine(tps=20, seed=42)
        bus = SignalBus()
        received = []
        bus.subscribe("reset", lambda n, d: received.append(n))
        engine.add_system(make_signal_system(bus))
        bus.publish("reset")
        assert received == []
        engine.step()
        assert received == ["reset"]
