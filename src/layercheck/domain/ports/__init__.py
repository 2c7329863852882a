"""Domain ports (interfaces)."""

from layercheck.domain.ports.reporter import ReporterProtocol
from layercheck.domain.ports.source_parser import SourceParserPort

__all__ = [
    "ReporterProtocol",
    "SourceParserPort",
]
