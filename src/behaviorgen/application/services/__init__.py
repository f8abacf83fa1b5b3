"""Application services: pipeline orchestration and output."""

from behaviorgen.application.services.pipeline import GenerationPipeline
from behaviorgen.application.services.writer import FragmentWriter, WriteReport

__all__ = [
    "FragmentWriter",
    "GenerationPipeline",
    "WriteReport",
]
