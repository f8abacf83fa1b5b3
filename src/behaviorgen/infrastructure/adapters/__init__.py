"""Infrastructure adapters for external interfaces."""

from behaviorgen.infrastructure.adapters.cached_extractor import CachedSymbolExtractor
from behaviorgen.infrastructure.adapters.csharp_parser import CSharpParser, ParsedArtifact
from behaviorgen.infrastructure.adapters.symbol_extractor import TreeSitterSymbolExtractor

__all__ = [
    "CachedSymbolExtractor",
    "CSharpParser",
    "ParsedArtifact",
    "TreeSitterSymbolExtractor",
]
