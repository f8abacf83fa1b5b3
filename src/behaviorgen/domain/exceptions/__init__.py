"""Domain exceptions."""

from behaviorgen.domain.exceptions.base import BehaviorGenError
from behaviorgen.domain.exceptions.configuration import ConfigurationError
from behaviorgen.domain.exceptions.generation import (
    DuplicateArtifactError,
    DuplicateEventNameError,
    RegistryError,
)
from behaviorgen.domain.exceptions.parsing import ParsingError

__all__ = [
    "BehaviorGenError",
    "ConfigurationError",
    "DuplicateArtifactError",
    "DuplicateEventNameError",
    "ParsingError",
    "RegistryError",
]
