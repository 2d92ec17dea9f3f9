"""Load stage - reads the sample text."""

import logging
import time
from typing import Optional

from mlcheck.pipeline.base import PipelineStage
from mlcheck.pipeline.context import PipelineContext
from mlcheck.parsers import SampleParser, TextSampleParser
from mlcheck.exceptions import MlcheckConfigError

logger = logging.getLogger(__name__)

EMPTY_SAMPLE_WARNING = "Sample string contents is empty."


class LoadStage(PipelineStage):
    """Stage that reads the sample file and splits it into lines."""

    def __init__(
        self,
        parser: Optional[SampleParser] = None,
        sample_path: Optional[str] = None,
    ) -> None:
        """Initialize the load stage.

        Args:
            parser: Sample parser to read files with
            sample_path: File to read instead of ``config.sample_path``
        """
        self._parser = parser or TextSampleParser()
        self._sample_path = sample_path

    @property
    def name(self) -> str:
        return "load"

    def process(self, context: PipelineContext) -> PipelineContext:
        """Load the sample unless one was supplied.

        Args:
            context: Pipeline context

        Returns:
            Updated context with the sample

        Raises:
            MlcheckConfigError: If no sample was supplied and no path is set
            MlcheckParseError: If the file cannot be read
        """
        start_time = time.time()

        if context.sample is None:
            sample_path = self._sample_path or context.config.sample_path
            if not sample_path:
                raise MlcheckConfigError("Must specify a file name.", "sample_path")
            context.sample = self._parser.parse(sample_path)

        if context.sample.is_empty:
            logger.warning(f"Sample {context.sample.source} is empty")
            context.add_warning(EMPTY_SAMPLE_WARNING)

        context.add_metric("load_time", time.time() - start_time)
        context.add_metric("source", context.sample.source)
        context.add_metric("line_count", context.sample.line_count)

        return context
