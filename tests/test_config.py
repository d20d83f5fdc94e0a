import pytest

from utc_calendar.config import PRE_EPOCH_POLICY_ENV, CalendarSettings, ConfigurationError
from utc_calendar.domain.time import PreEpochPolicy


def test_defaults_to_clamp_when_unset():
    assert CalendarSettings.from_env({}).pre_epoch_policy is PreEpochPolicy.CLAMP
    assert CalendarSettings.from_env({PRE_EPOCH_POLICY_ENV: "  "}).pre_epoch_policy is PreEpochPolicy.CLAMP


def test_reads_policy_case_insensitively():
    settings = CalendarSettings.from_env({PRE_EPOCH_POLICY_ENV: "Absolute"})
    assert settings.pre_epoch_policy is PreEpochPolicy.ABSOLUTE


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv(PRE_EPOCH_POLICY_ENV, "absolute")
    assert CalendarSettings.from_env().pre_epoch_policy is PreEpochPolicy.ABSOLUTE


def test_rejects_unknown_policy():
    with pytest.raises(ConfigurationError, match=PRE_EPOCH_POLICY_ENV):
        CalendarSettings.from_env({PRE_EPOCH_POLICY_ENV: "wrap"})
