"""
Runtime configuration for the HabitTracker application.

Settings are read from environment variables when a store is created and
validated with Pydantic so that bad values fail early.

Environment Variables:
    HABIT_TRACKER_SEED_DEFAULTS: Seed the default activities (default "true")
    HABIT_TRACKER_WEEK_STARTS_ON: First weekday of the grid, 0=Monday (default 0)
    HABIT_TRACKER_LOG_EVENTS: Emit structured event logs (default "true")
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class TrackerSettings(BaseModel):
    """
    Settings for a tracker session.

    Attributes:
        seed_defaults: Start with the default Reading/Exercise/Journaling activities
        week_starts_on: Weekday the week grid starts on (0=Monday ... 6=Sunday)
        log_events: Whether the store and services emit event logs
    """

    model_config = ConfigDict(frozen=True)

    seed_defaults: bool = True
    week_starts_on: int = Field(default=0, ge=0, le=6)
    log_events: bool = True

    @field_validator("seed_defaults", "log_events", mode="before")
    @classmethod
    def parse_flag(cls, v):
        if isinstance(v, str):
            lowered = v.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(f"Invalid boolean flag: {v!r}")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrackerSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            Validated TrackerSettings

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        values = {}

        if "HABIT_TRACKER_SEED_DEFAULTS" in env:
            values["seed_defaults"] = env["HABIT_TRACKER_SEED_DEFAULTS"]
        if "HABIT_TRACKER_WEEK_STARTS_ON" in env:
            values["week_starts_on"] = env["HABIT_TRACKER_WEEK_STARTS_ON"]
        if "HABIT_TRACKER_LOG_EVENTS" in env:
            values["log_events"] = env["HABIT_TRACKER_LOG_EVENTS"]

        return cls(**values)
