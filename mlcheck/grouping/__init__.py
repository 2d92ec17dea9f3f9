"""Line classification and group boundary tracking."""

from mlcheck.grouping.classifier import classify, compile_pattern, LinePredicate
from mlcheck.grouping.stack import BoolStack
from mlcheck.grouping.tracker import GroupBoundaryTracker

__all__ = [
    "classify",
    "compile_pattern",
    "LinePredicate",
    "BoolStack",
    "GroupBoundaryTracker",
]
