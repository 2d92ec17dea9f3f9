"""Compile stage - builds the line predicate from the configured pattern."""

from mlcheck.pipeline.base import PipelineStage
from mlcheck.pipeline.context import PipelineContext
from mlcheck.grouping import compile_pattern


class CompileStage(PipelineStage):
    """Stage that compiles the multiline pattern once, before any line is read."""

    @property
    def name(self) -> str:
        return "compile"

    def process(self, context: PipelineContext) -> PipelineContext:
        """Compile the configured pattern.

        Raises:
            MlcheckConfigError: If the pattern is missing or invalid
        """
        context.predicate = compile_pattern(context.config.pattern)
        context.add_metric("pattern", context.config.pattern)
        context.add_metric("negate", context.config.negate)
        return context
