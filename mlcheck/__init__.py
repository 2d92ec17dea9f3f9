"""
mlcheck: Multiline Grouping Rule Checker

Test a log shipper's multiline pattern against sample text and count the
logical events it would produce.
"""

from mlcheck.config import MultilineConfig
from mlcheck.checker import MultilineChecker
from mlcheck.grouping import classify, compile_pattern, GroupBoundaryTracker
from mlcheck.models import (
    CountingMode,
    MatchPosition,
    Sample,
    LineMatch,
    CheckResult,
)
from mlcheck.exceptions import (
    MlcheckError,
    MlcheckConfigError,
    MlcheckParseError,
    MlcheckPipelineError,
)

__version__ = "1.0.0"
__all__ = [
    # Main classes
    "MultilineChecker",
    "MultilineConfig",
    # Core
    "classify",
    "compile_pattern",
    "GroupBoundaryTracker",
    # Models
    "Sample",
    "LineMatch",
    "CheckResult",
    # Enums
    "CountingMode",
    "MatchPosition",
    # Exceptions
    "MlcheckError",
    "MlcheckConfigError",
    "MlcheckParseError",
    "MlcheckPipelineError",
]
