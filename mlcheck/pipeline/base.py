"""Base classes for pipeline components."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mlcheck.pipeline.context import PipelineContext


class PipelineStage(ABC):
    """Base class for all pipeline stages."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stage name for logging and metrics."""
        pass

    @abstractmethod
    def process(self, context: "PipelineContext") -> "PipelineContext":
        """Process the context and return updated context.

        Args:
            context: Pipeline context with current state

        Returns:
            Updated pipeline context
        """
        pass
