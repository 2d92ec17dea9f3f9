"""Pipeline orchestrator - coordinates execution of pipeline stages."""

import logging
import time
from typing import List, Optional

from mlcheck.pipeline.base import PipelineStage
from mlcheck.pipeline.context import PipelineContext
from mlcheck.config import MultilineConfig
from mlcheck.models import Sample

logger = logging.getLogger(__name__)


class PipelineOrchestrator:
    """Coordinates execution of pipeline stages."""

    def __init__(
        self,
        stages: List[PipelineStage],
        config: MultilineConfig,
    ) -> None:
        """Initialize the pipeline orchestrator.

        Args:
            stages: List of pipeline stages to execute
            config: Multiline configuration
        """
        self._stages = stages
        self._config = config

    def execute(self, sample: Optional[Sample] = None) -> PipelineContext:
        """Execute the pipeline.

        Args:
            sample: Pre-loaded sample; when None the load stage reads
                ``config.sample_path``

        Returns:
            Pipeline context with results
        """
        start_time = time.time()

        context = PipelineContext(config=self._config, sample=sample)

        for stage in self._stages:
            if context.should_stop:
                logger.warning(f"Pipeline stopped early at stage: {stage.name}")
                break

            logger.info(f"Executing stage: {stage.name}")

            try:
                stage_start = time.time()
                context = stage.process(context)
                stage_time = time.time() - stage_start

                if self._config.verbose:
                    logger.info(f"Stage {stage.name} completed in {stage_time:.4f}s")

            except Exception as e:
                logger.error(f"Error in stage {stage.name}: {e}")
                context.add_error(str(e))
                context.should_stop = True
                break

        # Record total time
        context.add_metric("total_time", time.time() - start_time)

        return context
