"""Dependency rule definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.domain.exceptions.configuration import ConfigurationError

if TYPE_CHECKING:
    from layercheck.domain.model.code_unit import CodeUnit
    from layercheck.domain.model.package_group import PackageGroup


@dataclass(frozen=True, slots=True)
class DependencyRule:
    """Units in any source group must not reference the forbidden group.

    Immutable, validated at construction. Only direct references count;
    no transitive closure is computed.

    Attributes:
        name: Rule identifier used in reports
        sources: Restricted layers (at least one)
        forbidden: Layer the sources must not reference
        reason: Human explanation shown with violations
    """

    name: str
    sources: tuple[PackageGroup, ...]
    forbidden: PackageGroup
    reason: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ConfigurationError("rule name must not be empty")
        if not self.sources:
            raise ConfigurationError(f"rule '{self.name}' has no source groups")
        if self.forbidden is None:
            raise TypeError("forbidden must not be None")
        if self.reason is not None and not self.reason.strip():
            raise ConfigurationError("reason must be non-empty string or None")

        names = [g.name for g in self.sources]
        if len(set(names)) != len(names):
            raise ConfigurationError(f"rule '{self.name}' has duplicate source groups: {names}")

        for group in self.sources:
            if group.name == self.forbidden.name:
                raise ConfigurationError(
                    f"group '{group.name}' cannot be both source and forbidden"
                )
            if group.overlaps_statically(self.forbidden):
                raise ConfigurationError(
                    f"groups overlap: {group} and {self.forbidden} share namespaces"
                )

    def source_group_of(self, unit: CodeUnit) -> PackageGroup | None:
        """First source group containing unit, None if unit is unrestricted."""
        for group in self.sources:
            if group.matches(unit):
                return group
        return None

    @property
    def source_names(self) -> tuple[str, ...]:
        """Names of source groups in declaration order."""
        return tuple(g.name for g in self.sources)

    def describe(self) -> str:
        """One-line rule description."""
        sources = " or ".join(str(g) for g in self.sources)
        return f"no unit in {sources} may depend on {self.forbidden}"
