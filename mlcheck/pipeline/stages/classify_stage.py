"""Classify stage - classifies each line and tracks group boundaries."""

import logging
import time

from mlcheck.pipeline.base import PipelineStage
from mlcheck.pipeline.context import PipelineContext
from mlcheck.grouping import classify, GroupBoundaryTracker
from mlcheck.models import LineMatch
from mlcheck.exceptions import MlcheckPipelineError

logger = logging.getLogger(__name__)


class ClassifyStage(PipelineStage):
    """Stage that feeds every line, in order, through the boundary tracker."""

    @property
    def name(self) -> str:
        return "classify"

    def process(self, context: PipelineContext) -> PipelineContext:
        """Classify lines and count completed groups.

        Args:
            context: Pipeline context with a predicate and a sample

        Returns:
            Updated context with line matches and a populated tracker
        """
        start_time = time.time()

        if context.predicate is None:
            raise MlcheckPipelineError("No compiled pattern to classify with", self.name)
        if context.sample is None:
            raise MlcheckPipelineError("No sample to classify", self.name)

        negate = context.config.negate
        tracker = GroupBoundaryTracker(mode=context.config.counting_mode)
        matches = []
        # Empty content is shown as one blank line but holds no run to count
        counting = not context.sample.is_empty

        for index, line in enumerate(context.sample.lines):
            matched = classify(line, context.predicate, negate)
            if counting:
                tracker.record_and_maybe_count(matched)
            matches.append(LineMatch(index=index, text=line, matched=matched))

        if tracker.has_pending_tail:
            logger.debug("Sample ends with an unconfirmed group; not counted")

        context.tracker = tracker
        context.line_matches = matches

        # Record metrics
        context.add_metric("classify_time", time.time() - start_time)
        context.add_metric("matched_line_count", sum(1 for m in matches if m.matched))
        context.add_metric("pending_tail", tracker.has_pending_tail)
        context.add_metric("counting_mode", tracker.mode.value)
        context.add_metric("total_groups", tracker.total_groups())

        return context
