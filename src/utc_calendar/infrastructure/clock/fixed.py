from __future__ import annotations

from datetime import timedelta
from typing import Union

from utc_calendar.ports.clock import WallClockPort


class FixedWallClock(WallClockPort):
    """Clock pinned to a settable offset from the epoch.

    Useful wherever "now" has to be deterministic, e.g. in tests.
    """

    def __init__(self, offset: Union[timedelta, int, float] = timedelta(0)) -> None:
        self._offset = self._to_timedelta(offset)

    def since_epoch(self) -> timedelta:
        return self._offset

    def set(self, offset: Union[timedelta, int, float]) -> None:
        self._offset = self._to_timedelta(offset)

    def advance(self, **kwargs: float) -> None:
        """Move the clock by the given ``timedelta`` keyword arguments."""
        self._offset += timedelta(**kwargs)

    @staticmethod
    def _to_timedelta(offset: Union[timedelta, int, float]) -> timedelta:
        if isinstance(offset, timedelta):
            return offset
        return timedelta(seconds=offset)
