"""Data models for mlcheck."""

from mlcheck.models.enums import CountingMode, MatchPosition
from mlcheck.models.sample import Sample, LineMatch
from mlcheck.models.result import CheckResult

__all__ = [
    "CountingMode",
    "MatchPosition",
    "Sample",
    "LineMatch",
    "CheckResult",
]
