"""Unit tests for SignalBus."""
from __future__ import annotations

from tick_signal import SignalBus


def _recorder(received: list):
    def handler(signal_name: str, data: dict) -> None:
        received.append((signal_name, data))

    return handler


def test_subscribe_and_flush():
    """Publish queues; flush delivers to the subscriber."""
    bus = SignalBus()
    received = []
    bus.subscribe("landed", _recorder(received))
    bus.publish("landed", row=1, col=5)
    assert received == []
    bus.flush()
    assert received == [("landed", {"row": 1, "col": 5})]
    bus.flush()
    assert len(received) == 1


def test_publish_without_subscribers():
    """Flushing signals nobody listens to is a no-op."""
    bus = SignalBus()
    bus.publish("nobody", value=1)
    bus.flush()


def test_handlers_called_in_subscription_order():
    """Multiple handlers for one signal run in order."""
    bus = SignalBus()
    order = []
    bus.subscribe("won", lambda n, d: order.append("a"))
    bus.subscribe("won", lambda n, d: order.append("b"))
    bus.publish("won", popped=20)
    bus.flush()
    assert order == ["a", "b"]


def test_signals_delivered_in_publish_order():
    """Queued signals flush FIFO across names."""
    bus = SignalBus()
    received = []
    bus.subscribe("phase", _recorder(received))
    bus.subscribe("lost", _recorder(received))
    bus.publish("phase", new="game_over")
    bus.publish("lost", reason="landing")
    bus.flush()
    assert [name for name, _ in received] == ["phase", "lost"]


def test_publish_during_flush_waits_for_next_flush():
    """A handler's own publish lands in the next flush."""
    bus = SignalBus()
    received = []
    bus.subscribe("popped", lambda n, d: bus.publish("won", popped=d["total"]))
    bus.subscribe("won", _recorder(received))
    bus.publish("popped", total=20)
    bus.flush()
    assert received == []
    bus.flush()
    assert received == [("won", {"popped": 20})]
