"""Domain ports (interfaces implemented by outer layers)."""

from behaviorgen.domain.ports.reporter import ReporterProtocol
from behaviorgen.domain.ports.symbol_extractor import SymbolExtractorPort

__all__ = [
    "ReporterProtocol",
    "SymbolExtractorPort",
]
