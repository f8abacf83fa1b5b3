"""Template-based emission of generated fragments."""

from behaviorgen.application.emission.renderer import FragmentRenderer
from behaviorgen.application.emission.templates import FragmentBuilder

__all__ = [
    "FragmentBuilder",
    "FragmentRenderer",
]
