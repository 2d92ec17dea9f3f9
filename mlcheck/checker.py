"""Main MultilineChecker class - entry point for the library."""

import logging
from typing import Optional

from mlcheck.config import MultilineConfig
from mlcheck.models import CheckResult, Sample
from mlcheck.parsers import SampleParser, TextSampleParser
from mlcheck.pipeline.orchestrator import PipelineOrchestrator
from mlcheck.pipeline.stages import CompileStage, LoadStage, ClassifyStage

logger = logging.getLogger(__name__)


class MultilineChecker:
    """Checks a multiline grouping rule against sample text."""

    def __init__(
        self,
        config: Optional[MultilineConfig] = None,
        parser: Optional[SampleParser] = None,
    ) -> None:
        """Initialize the checker.

        Args:
            config: Configuration object
            parser: Custom sample parser
        """
        self._config = config or MultilineConfig()
        self._parser = parser or TextSampleParser()

    def check(self, sample_path: Optional[str] = None) -> CheckResult:
        """Check the configured rule against a sample file.

        Args:
            sample_path: Sample file; defaults to ``config.sample_path``

        Returns:
            CheckResult with per-line matches and the group count
        """
        return self._run(sample=None, sample_path=sample_path)

    def check_text(self, text: str) -> CheckResult:
        """Check the configured rule against in-memory text.

        Args:
            text: Sample content

        Returns:
            CheckResult with per-line matches and the group count
        """
        return self._run(sample=self._parser.parse_text(text), sample_path=None)

    def _run(
        self, sample: Optional[Sample], sample_path: Optional[str]
    ) -> CheckResult:
        # The pattern compiles before any line is read or classified
        orchestrator = PipelineOrchestrator(
            stages=[
                CompileStage(),
                LoadStage(parser=self._parser, sample_path=sample_path),
                ClassifyStage(),
            ],
            config=self._config,
        )

        context = orchestrator.execute(sample=sample)

        result = CheckResult(
            success=not context.has_errors,
            lines=context.line_matches,
            total_groups=context.total_groups,
            metrics=context.metrics,
            warnings=context.warnings,
            errors=context.errors,
        )
        logger.info(
            f"Checked {result.line_count} lines: {result.total_groups} groups"
        )
        return result

    @property
    def config(self) -> MultilineConfig:
        """Get the configuration."""
        return self._config
