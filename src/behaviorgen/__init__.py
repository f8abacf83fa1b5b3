"""behaviorgen - signal wiring generator for Godot C# Behavior classes."""

__version__ = "0.1.0"

from behaviorgen.application.services.pipeline import GenerationPipeline
from behaviorgen.domain.model.configuration import GeneratorConfig

__all__ = ["GenerationPipeline", "GeneratorConfig", "__version__"]
