"""Pipeline components for mlcheck."""

from mlcheck.pipeline.base import PipelineStage
from mlcheck.pipeline.context import PipelineContext
from mlcheck.pipeline.orchestrator import PipelineOrchestrator

__all__ = [
    "PipelineStage",
    "PipelineContext",
    "PipelineOrchestrator",
]
