"""
Preference models — what the user asked for, and the key history is scoped by.

PreferenceQuery is built once per prompt round from validated input.
PreferenceKey is derived from it and is the unit of deduplication: two queries
with the same (operating system, charging time) always derive equal keys.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class OperatingSystem(str, Enum):
    """Operating systems a user may ask for."""

    ANDROID = "ANDROID"
    IOS = "IOS"


def normalize_os_name(value: str) -> str:
    """Canonical spelling of an OS name: trimmed and upper-cased."""
    return value.strip().upper()


class PreferenceKey(BaseModel):
    """Hashable history key for one preference combination."""

    model_config = ConfigDict(frozen=True)

    operating_system: OperatingSystem
    max_charging_time_minutes: float

    def __str__(self) -> str:
        return f"{self.operating_system.value}_{self.max_charging_time_minutes:g}"


class PreferenceQuery(BaseModel):
    """A user's preferences for one recommendation round."""

    model_config = ConfigDict(frozen=True)

    operating_system: OperatingSystem
    max_charging_time_minutes: float

    @field_validator("operating_system", mode="before")
    @classmethod
    def _normalize_operating_system(cls, value: Any) -> Any:
        if isinstance(value, str):
            return normalize_os_name(value)
        return value

    @property
    def key(self) -> PreferenceKey:
        return PreferenceKey(
            operating_system=self.operating_system,
            max_charging_time_minutes=self.max_charging_time_minutes,
        )
