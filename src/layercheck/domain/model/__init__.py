"""Domain model: code units, groups, rules, results."""

from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.code_unit import CodeUnit
from layercheck.domain.model.enums import CheckStatus, ImportScope, ReferenceKind, UnitKind
from layercheck.domain.model.import_ import Import
from layercheck.domain.model.location import Location
from layercheck.domain.model.namespace_pattern import NamespacePattern, compile_namespace_pattern
from layercheck.domain.model.package_group import PackageGroup
from layercheck.domain.model.parsed_module import ParsedClass, ParsedModule
from layercheck.domain.model.reference import Reference
from layercheck.domain.model.rule import DependencyRule
from layercheck.domain.model.snapshot import Snapshot
from layercheck.domain.model.symbol_table import SymbolTable
from layercheck.domain.model.violation import Violation

__all__ = [
    # Enums
    "UnitKind",
    "ReferenceKind",
    "CheckStatus",
    "ImportScope",
    # Value objects
    "Location",
    "Reference",
    "Import",
    "NamespacePattern",
    "compile_namespace_pattern",
    # Entities
    "CodeUnit",
    "ParsedClass",
    "ParsedModule",
    "SymbolTable",
    # Rules
    "PackageGroup",
    "DependencyRule",
    "Violation",
    # Aggregates
    "Snapshot",
    "CheckResult",
]
