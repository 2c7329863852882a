"""AST analyzers for extracting dependencies from Python source."""

from layercheck.infrastructure.analyzers.base import (
    compute_module_name,
    dotted_name,
    make_location,
    parse_forward_reference,
    resolve_relative_import,
)
from layercheck.infrastructure.analyzers.context import AnalysisContext, ContextFrame, ContextType
from layercheck.infrastructure.analyzers.import_analyzer import ImportAnalyzer
from layercheck.infrastructure.analyzers.reference_analyzer import ReferenceAnalyzer

__all__ = [
    # Analyzers
    "ImportAnalyzer",
    "ReferenceAnalyzer",
    # Context
    "AnalysisContext",
    "ContextFrame",
    "ContextType",
    # Utilities
    "compute_module_name",
    "dotted_name",
    "make_location",
    "parse_forward_reference",
    "resolve_relative_import",
]
