import logging
from datetime import datetime, timedelta, timezone

import utc_calendar
from utc_calendar.application.services import CalendarService
from utc_calendar.config import PRE_EPOCH_POLICY_ENV, CalendarSettings
from utc_calendar.domain.labels import Month, Weekday
from utc_calendar.domain.time import PreEpochPolicy
from utc_calendar.infrastructure.clock import FixedWallClock


def test_now_utc_reads_injected_clock():
    service = CalendarService(clock=FixedWallClock(timedelta(days=10_957)))
    instant = service.now_utc()
    assert instant.date_tuple() == (2000, 1, 1)
    assert instant.weekday is Weekday.SATURDAY


def test_settings_select_pre_epoch_policy():
    clock = FixedWallClock(timedelta(days=-1))
    clamped = CalendarService(clock=clock)
    mirrored = CalendarService(clock=clock, settings=CalendarSettings(pre_epoch_policy=PreEpochPolicy.ABSOLUTE))
    assert clamped.now_utc().date_tuple() == (1970, 1, 1)
    assert mirrored.now_utc().date_tuple() == (1970, 1, 2)


def test_service_conversions_log_at_debug(caplog):
    service = CalendarService(clock=FixedWallClock())
    with caplog.at_level(logging.DEBUG, logger="utc_calendar.application.services"):
        instant = service.from_epoch_seconds(86_400 * 31)
    assert instant.month is Month.FEBRUARY
    assert "1970-02-01T00:00:00Z" in caplog.text


def test_service_converts_system_time():
    service = CalendarService(clock=FixedWallClock())
    moment = datetime(2024, 2, 29, 23, 59, 59, tzinfo=timezone.utc)
    assert service.from_system_time(moment).isoformat() == "2024-02-29T23:59:59Z"


def test_package_level_helpers(monkeypatch):
    monkeypatch.delenv(PRE_EPOCH_POLICY_ENV, raising=False)
    assert utc_calendar.now_utc().year >= 2022
    assert utc_calendar.from_epoch_seconds(0).weekday is utc_calendar.Weekday.THURSDAY
