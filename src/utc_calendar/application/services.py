from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from utc_calendar.config import CalendarSettings
from utc_calendar.domain.time import CivilInstant
from utc_calendar.ports.clock import WallClockPort


class CalendarService:
    """Application service turning clock readings and timestamps into civil instants."""

    def __init__(self, clock: WallClockPort, settings: Optional[CalendarSettings] = None) -> None:
        self.clock = clock
        self.settings = settings or CalendarSettings()
        self.logger = logging.getLogger(__name__)
        self.logger.info(
            "Initialized CalendarService with clock=%s, pre_epoch_policy=%s",
            type(clock).__name__,
            self.settings.pre_epoch_policy.value,
        )

    def now_utc(self) -> CivilInstant:
        instant = CivilInstant.now_utc(self.clock, self.settings.pre_epoch_policy)
        self.logger.debug("Sampled clock at %s", instant)
        return instant

    def from_epoch_seconds(self, seconds: int) -> CivilInstant:
        instant = CivilInstant.from_epoch_seconds(seconds)
        self.logger.debug("Converted timestamp %d to %s", seconds, instant)
        return instant

    def from_system_time(self, moment: datetime) -> CivilInstant:
        instant = CivilInstant.from_system_time(moment, self.settings.pre_epoch_policy)
        self.logger.debug("Converted %s to %s", moment.isoformat(), instant)
        return instant
