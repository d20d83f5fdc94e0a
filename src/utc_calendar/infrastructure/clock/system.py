from __future__ import annotations

from datetime import datetime, timedelta, timezone

from utc_calendar.domain.time import UNIX_EPOCH
from utc_calendar.ports.clock import WallClockPort


class SystemWallClock(WallClockPort):
    """Reads the host's real-time clock."""

    def since_epoch(self) -> timedelta:
        return datetime.now(timezone.utc) - UNIX_EPOCH
