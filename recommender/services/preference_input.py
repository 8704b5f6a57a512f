"""
Preference input — prompts for the user's operating system and maximum charging
time, re-prompting until each answer is valid.

parse_operating_system and parse_charging_time_preference are the pure
validators; PreferenceInputReader wraps them in prompt loops over a LineIO.
"""

import logging
import math

from ..errors import InputValidationError
from ..models.preferences import OperatingSystem, PreferenceQuery, normalize_os_name
from .line_io import LineIO

logger = logging.getLogger(__name__)

OS_PROMPT = "Please enter which operating system you would prefer (ANDROID or IOS):"
OS_INVALID = "This is an invalid input. Please enter either 'ANDROID' or 'IOS'."
CHARGING_TIME_PROMPT = "What's the highest charging speed time you can tolerate? (in minutes)"
CHARGING_TIME_INVALID = "Invalid input. Please enter a valid number."


def parse_operating_system(text: str) -> OperatingSystem:
    """Case-insensitive match against ANDROID / IOS."""
    normalized = normalize_os_name(text)
    try:
        return OperatingSystem(normalized)
    except ValueError as e:
        raise InputValidationError(f"Unknown operating system: {text!r}") from e


def parse_charging_time_preference(text: str) -> float:
    """
    Parse a charging time in minutes. Any finite number is accepted,
    including decimals and negatives.
    """
    try:
        value = float(text)
    except ValueError as e:
        raise InputValidationError(f"Not a number: {text!r}") from e
    if not math.isfinite(value):
        raise InputValidationError(f"Not a finite number: {text!r}")
    return value


class PreferenceInputReader:
    """Reads a validated PreferenceQuery from a LineIO."""

    def __init__(self, io: LineIO):
        self.io = io

    def read_operating_system(self) -> OperatingSystem:
        while True:
            self.io.write(OS_PROMPT)
            line = self.io.read_line()
            self.io.write()
            try:
                return parse_operating_system(line)
            except InputValidationError as e:
                logger.debug("Rejected OS input: %s", e)
                self.io.write(OS_INVALID)

    def read_max_charging_time(self) -> float:
        while True:
            self.io.write(CHARGING_TIME_PROMPT)
            line = self.io.read_line()
            try:
                return parse_charging_time_preference(line)
            except InputValidationError as e:
                logger.debug("Rejected charging time input: %s", e)
                self.io.write()
                self.io.write(CHARGING_TIME_INVALID)

    def read_query(self) -> PreferenceQuery:
        """Prompt for OS then charging time. EndOfInputError propagates."""
        operating_system = self.read_operating_system()
        max_charging_time = self.read_max_charging_time()
        return PreferenceQuery(
            operating_system=operating_system,
            max_charging_time_minutes=max_charging_time,
        )
