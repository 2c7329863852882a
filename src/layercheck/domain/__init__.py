"""layercheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, re, types, collections.abc
"""

from layercheck.domain.exceptions import (
    ConfigurationError,
    LayerCheckError,
    LayerViolationError,
    NothingCheckedWarning,
    OverlappingGroupsError,
    ParseError,
)
from layercheck.domain.model import (
    CheckResult,
    CheckStatus,
    CodeUnit,
    DependencyRule,
    ImportScope,
    Location,
    PackageGroup,
    Reference,
    ReferenceKind,
    Snapshot,
    UnitKind,
    Violation,
)
from layercheck.domain.ports import ReporterProtocol, SourceParserPort

__all__ = [
    # Exceptions
    "LayerCheckError",
    "ConfigurationError",
    "OverlappingGroupsError",
    "ParseError",
    "LayerViolationError",
    "NothingCheckedWarning",
    # Enums
    "UnitKind",
    "ReferenceKind",
    "CheckStatus",
    "ImportScope",
    # Model
    "Location",
    "Reference",
    "CodeUnit",
    "PackageGroup",
    "DependencyRule",
    "Violation",
    "Snapshot",
    "CheckResult",
    # Ports
    "SourceParserPort",
    "ReporterProtocol",
]
