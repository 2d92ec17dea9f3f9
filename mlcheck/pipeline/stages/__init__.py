"""Pipeline stages for mlcheck."""

from mlcheck.pipeline.stages.compile_stage import CompileStage
from mlcheck.pipeline.stages.load_stage import LoadStage
from mlcheck.pipeline.stages.classify_stage import ClassifyStage

__all__ = [
    "CompileStage",
    "LoadStage",
    "ClassifyStage",
]
