from __future__ import annotations

from enum import IntEnum


class Month(IntEnum):
    """Calendar month, valued by its 1-based number."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def abbreviation(self) -> str:
        return self.label[:3]

    def __str__(self) -> str:
        return self.label


class Weekday(IntEnum):
    """Day of the week using ISO numbering (Monday is 1, Sunday is 7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def abbreviation(self) -> str:
        return self.label[:3]

    def __str__(self) -> str:
        return self.label
