"""Package group: named predicate over unit namespaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.domain.exceptions.configuration import ConfigurationError
from layercheck.domain.model.namespace_pattern import (
    NamespacePattern,
    compile_namespace_pattern,
)

if TYPE_CHECKING:
    from layercheck.domain.model.code_unit import CodeUnit


@dataclass(frozen=True, slots=True)
class PackageGroup:
    """Logical architectural layer.

    A unit belongs to the group when its namespace matches any pattern.

    Attributes:
        name: Layer name used in reports (service, repository, web)
        patterns: Compiled namespace patterns (at least one)
    """

    name: str
    patterns: tuple[NamespacePattern, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ConfigurationError("package group name must not be empty")
        if not self.patterns:
            raise ConfigurationError(f"package group '{self.name}' has no patterns")

    @classmethod
    def of(cls, name: str, *patterns: str) -> PackageGroup:
        """Build group from pattern strings.

        Raises:
            ConfigurationError: Empty name, no patterns, malformed pattern
        """
        return cls(name=name, patterns=tuple(compile_namespace_pattern(p) for p in patterns))

    def matches_namespace(self, namespace: str) -> bool:
        """Check if dotted namespace falls into this group."""
        return any(p.match(namespace) for p in self.patterns)

    def matches(self, unit: CodeUnit) -> bool:
        """Check if code unit falls into this group."""
        return self.matches_namespace(unit.package)

    def overlaps_statically(self, other: PackageGroup) -> bool:
        """Patterns of both groups provably share namespaces.

        Only textual containment is detected; overlaps that need concrete
        namespaces show up when units are classified.
        """
        return any(p.contains(q) or q.contains(p) for p in self.patterns for q in other.patterns)

    def __str__(self) -> str:
        """Format as name[patterns]."""
        return f"{self.name}[{', '.join(str(p) for p in self.patterns)}]"
