"""tick-schedule - Tick-counted timers for the tick engine."""
from __future__ import annotations

from tick_schedule.components import Periodic, Timer
from tick_schedule.systems import make_periodic_system, make_timer_system

__all__ = ["Timer", "Periodic", "make_timer_system", "make_periodic_system"]
