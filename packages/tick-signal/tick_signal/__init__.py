"""tick-signal - In-process event bus for the tick engine."""
from __future__ import annotations

from tick_signal.bus import Handler, SignalBus
from tick_signal.systems import make_signal_system

__all__ = ["Handler", "SignalBus", "make_signal_system"]
