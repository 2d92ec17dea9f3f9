"""Enumerations for mlcheck models."""

from enum import Enum


class CountingMode(str, Enum):
    """Policy deciding when the boundary tracker increments its count."""

    CONFIRMED = "confirmed"
    RUN_START = "run_start"

    @classmethod
    def from_string(cls, value: str) -> "CountingMode":
        """Convert string to CountingMode.

        Raises:
            ValueError: If the value names no known mode
        """
        return cls(value.strip().lower().replace("-", "_"))


class MatchPosition(str, Enum):
    """Where non-matching lines attach, per ``multiline.match``."""

    AFTER = "after"
    BEFORE = "before"
