from __future__ import annotations

from datetime import timedelta
from typing import Protocol


class WallClockPort(Protocol):
    """Output port for reading the current wall-clock time."""

    def since_epoch(self) -> timedelta:
        """Signed duration elapsed since 1970-01-01T00:00:00Z.

        Negative when the clock reports a time before the epoch.
        """
        ...
