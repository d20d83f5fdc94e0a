from utc_calendar.infrastructure.clock.fixed import FixedWallClock
from utc_calendar.infrastructure.clock.system import SystemWallClock

__all__ = ["FixedWallClock", "SystemWallClock"]
