from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from utc_calendar.domain.time import PreEpochPolicy

PRE_EPOCH_POLICY_ENV = "UTC_CALENDAR_PRE_EPOCH_POLICY"


class ConfigurationError(ValueError):
    pass


class CalendarSettings(BaseModel):
    """Tunable behavior of the calendar service."""

    pre_epoch_policy: PreEpochPolicy = Field(
        default=PreEpochPolicy.CLAMP,
        description="What to do with clock readings earlier than the Unix epoch",
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalendarSettings":
        """
        Build settings from environment variables.

        Optional:
        - UTC_CALENDAR_PRE_EPOCH_POLICY  (clamp | absolute, default: clamp)
        """
        env = os.environ if environ is None else environ
        raw = env.get(PRE_EPOCH_POLICY_ENV, "").strip().lower()
        if not raw:
            return cls()
        try:
            policy = PreEpochPolicy(raw)
        except ValueError:
            allowed = ", ".join(member.value for member in PreEpochPolicy)
            raise ConfigurationError(
                f"Invalid {PRE_EPOCH_POLICY_ENV}={raw!r}; expected one of: {allowed}"
            ) from None
        return cls(pre_epoch_policy=policy)
