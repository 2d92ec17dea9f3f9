"""Pipeline context for carrying state through stages."""

from dataclasses import dataclass, field
from typing import List, Optional, Any, Dict

from mlcheck.config import MultilineConfig
from mlcheck.grouping import LinePredicate, GroupBoundaryTracker
from mlcheck.models import Sample, LineMatch


@dataclass
class PipelineContext:
    """Carries state through the pipeline stages."""

    # Input
    config: MultilineConfig
    sample: Optional[Sample] = None

    # Stage outputs (populated as pipeline progresses)
    predicate: Optional[LinePredicate] = None
    tracker: Optional[GroupBoundaryTracker] = None
    line_matches: List[LineMatch] = field(default_factory=list)

    # Control flow
    should_stop: bool = False

    # Metrics
    metrics: Dict[str, Any] = field(default_factory=dict)

    # Error tracking
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        """Add an error message."""
        self.errors.append(error)

    def add_warning(self, warning: str) -> None:
        """Add a warning message."""
        self.warnings.append(warning)

    def add_metric(self, key: str, value: Any) -> None:
        """Add or update a metric."""
        self.metrics[key] = value

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    @property
    def total_groups(self) -> int:
        """Get the tracker's group count, or 0 before classification."""
        if self.tracker is None:
            return 0
        return self.tracker.total_groups()
