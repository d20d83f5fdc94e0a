from .application.services import CalendarService
from .config import CalendarSettings, ConfigurationError
from .domain.labels import Month, Weekday
from .domain.time import CivilInstant, PreEpochPolicy, TimestampOutOfRangeError
from .infrastructure.clock import FixedWallClock, SystemWallClock
from .ports.clock import WallClockPort


def now_utc() -> CivilInstant:
    """Current UTC instant from the system clock, honoring environment settings."""
    return CivilInstant.now_utc(SystemWallClock(), CalendarSettings.from_env().pre_epoch_policy)


def from_epoch_seconds(seconds: int) -> CivilInstant:
    return CivilInstant.from_epoch_seconds(seconds)


__all__ = [
    "CalendarService",
    "CalendarSettings",
    "CivilInstant",
    "ConfigurationError",
    "FixedWallClock",
    "Month",
    "PreEpochPolicy",
    "SystemWallClock",
    "TimestampOutOfRangeError",
    "WallClockPort",
    "Weekday",
    "from_epoch_seconds",
    "now_utc",
]
