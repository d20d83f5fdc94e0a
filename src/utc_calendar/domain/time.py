from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import TYPE_CHECKING, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from utc_calendar.domain.calendar import civil_from_days, day_of_week, days_in_month, split_seconds
from utc_calendar.domain.labels import Month, Weekday

if TYPE_CHECKING:
    from utc_calendar.ports.clock import WallClockPort

logger = logging.getLogger(__name__)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MAX_EPOCH_SECONDS = 2**64 - 1

MILLIS_PER_SECOND = 1_000
NANOS_PER_SECOND = 1_000_000_000


class TimestampOutOfRangeError(ValueError):
    pass


class PreEpochPolicy(str, Enum):
    """How a clock reading earlier than the epoch becomes epoch seconds."""

    CLAMP = "clamp"
    ABSOLUTE = "absolute"


def epoch_seconds_from_offset(offset: timedelta, policy: PreEpochPolicy = PreEpochPolicy.CLAMP) -> int:
    """Whole seconds of a signed offset from the epoch, never negative.

    A negative offset is either clamped to zero or replaced by its distance
    from the epoch, depending on ``policy``. Sub-second parts are dropped.
    """
    if offset < timedelta(0):
        if policy is PreEpochPolicy.CLAMP:
            logger.warning("Clock reading %s precedes the Unix epoch; clamping to epoch", offset)
            return 0
        logger.warning("Clock reading %s precedes the Unix epoch; using its distance from the epoch", offset)
        offset = -offset
    return offset // timedelta(seconds=1)


class CivilInstant(BaseModel):
    """A UTC instant broken down into proleptic Gregorian calendar fields.

    Instances are immutable and are built from a count of seconds since
    1970-01-01T00:00:00Z. Sub-second precision is not tracked.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    second: int = Field(ge=0, le=59)
    minute: int = Field(ge=0, le=59)
    hour: int = Field(ge=0, le=23)
    day: int = Field(ge=1, le=31)
    month: Month
    year: int = Field(ge=0)
    weekday: Weekday
    epoch_seconds: int = Field(alias="timestamp", ge=0, le=MAX_EPOCH_SECONDS)

    @model_validator(mode="after")
    def _validate_calendar_fields(self) -> "CivilInstant":
        limit = days_in_month(self.year, self.month)
        if self.day > limit:
            raise ValueError(f"{self.month.label} {self.year} has {limit} days, got day {self.day}")
        expected = _civil_fields(self.epoch_seconds)
        actual = (self.second, self.minute, self.hour, self.day, self.month, self.year, self.weekday)
        if actual != expected:
            raise ValueError(f"calendar fields do not match timestamp {self.epoch_seconds}")
        return self

    # Factories ---------------------------------------------------------------

    @classmethod
    def from_epoch_seconds(cls, seconds: int) -> "CivilInstant":
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise TypeError(f"epoch seconds must be an int, got {type(seconds).__name__}")
        if not 0 <= seconds <= MAX_EPOCH_SECONDS:
            raise TimestampOutOfRangeError(
                f"epoch seconds must be within 0..{MAX_EPOCH_SECONDS}, got {seconds}"
            )
        second, minute, hour, day, month, year, weekday = _civil_fields(seconds)
        return cls(
            second=second,
            minute=minute,
            hour=hour,
            day=day,
            month=month,
            year=year,
            weekday=weekday,
            timestamp=seconds,
        )

    @classmethod
    def from_system_time(
        cls, moment: datetime, policy: PreEpochPolicy = PreEpochPolicy.CLAMP
    ) -> "CivilInstant":
        """Convert a ``datetime``; naive values are taken to be UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        else:
            moment = moment.astimezone(timezone.utc)
        return cls.from_epoch_seconds(epoch_seconds_from_offset(moment - UNIX_EPOCH, policy))

    @classmethod
    def now_utc(cls, clock: "WallClockPort", policy: PreEpochPolicy = PreEpochPolicy.CLAMP) -> "CivilInstant":
        return cls.from_epoch_seconds(epoch_seconds_from_offset(clock.since_epoch(), policy))

    # Projections -------------------------------------------------------------

    def unix_timestamp(self) -> int:
        return self.epoch_seconds

    def unix_timestamp_millis(self) -> int:
        return self.epoch_seconds * MILLIS_PER_SECOND

    def unix_timestamp_nanos(self) -> int:
        return self.epoch_seconds * NANOS_PER_SECOND

    def date_tuple(self) -> Tuple[int, int, int]:
        return self.year, int(self.month), self.day

    def time_tuple(self) -> Tuple[int, int, int]:
        return self.hour, self.minute, self.second

    def to_datetime(self) -> datetime:
        """Aware UTC ``datetime``; raises ``ValueError`` past year 9999."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second, tzinfo=timezone.utc)

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{int(self.month):02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}Z"
        )

    def __str__(self) -> str:
        return self.isoformat()


def _civil_fields(seconds: int) -> Tuple[int, int, int, int, Month, int, Weekday]:
    second, minute, hour, days = split_seconds(seconds)
    year, month, day = civil_from_days(days)
    weekday = day_of_week(year, month, day)
    return second, minute, hour, day, Month(month), year, Weekday(weekday)
