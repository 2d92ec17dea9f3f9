"""Result models for mlcheck."""

from dataclasses import dataclass, field
from typing import List, Dict, Any

from mlcheck.models.sample import LineMatch


@dataclass
class CheckResult:
    """Result of checking a multiline rule against a sample."""

    success: bool
    lines: List[LineMatch]
    total_groups: int
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        """Get the number of classified lines."""
        return len(self.lines)

    @property
    def matched_count(self) -> int:
        """Get the number of lines classified as matching."""
        return sum(1 for line in self.lines if line.matched)

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "success": self.success,
            "total_groups": self.total_groups,
            "line_count": self.line_count,
            "matched_count": self.matched_count,
            "metrics": self.metrics,
            "warnings": self.warnings,
            "errors": self.errors,
        }
