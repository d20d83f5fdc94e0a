from __future__ import annotations

from typing import Tuple

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def split_seconds(total: int) -> Tuple[int, int, int, int]:
    """Split elapsed seconds into ``(seconds, minutes, hours, days)`` by floor division."""
    if total < 0:
        raise ValueError(f"total seconds must be non-negative, got {total}")
    seconds = total % 60
    minutes = (total // SECONDS_PER_MINUTE) % 60
    hours = (total // SECONDS_PER_HOUR) % 24
    days = total // SECONDS_PER_DAY
    return seconds, minutes, hours, days


def join_seconds(seconds: int, minutes: int, hours: int, days: int) -> int:
    return days * SECONDS_PER_DAY + hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """Map whole days since 1970-01-01 to a proleptic Gregorian ``(year, month, day)``.

    Months are counted internally from March (1) through the following
    February (14) so the leap day falls at the end of the internal year.
    The returned month is always 1..12.
    """
    if days < 0:
        raise ValueError(f"day count must be non-negative, got {days}")

    a = (4 * days + 102032) // 146097 + 15
    b = days + 2442113 + a - a // 4
    c = (20 * b - 2442) // 7305
    d = b - 365 * c - c // 4
    e = d * 1000 // 30601
    f = d - e * 30 - e * 601 // 1000

    # January and February are months 13 and 14 of the previous year
    if e <= 13:
        return c - 4716, e - 1, f
    return c - 4715, e - 13, f


def day_of_week(year: int, month: int, day: int) -> int:
    """Zeller's congruence, remapped so that 1 is Monday and 7 is Sunday.

    The arguments are not validated.
    """
    if month <= 2:
        month += 12
        year -= 1

    century = year // 100
    year_of_century = year % 100

    h = (
        day
        + 26 * (month + 1) // 10
        + year_of_century
        + year_of_century // 4
        + 5 * century
        + century // 4
    )
    # Raw h counts from Saturday = 0
    return (h + 5) % 7 + 1


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]
