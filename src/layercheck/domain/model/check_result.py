"""Check result aggregate for one layering check."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.domain.model.enums import CheckStatus

if TYPE_CHECKING:
    from layercheck.domain.model.rule import DependencyRule
    from layercheck.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of running one rule over one snapshot.

    Immutable aggregate, used by reporters.

    Attributes:
        rule: Rule that was checked
        status: CONFORMANT / VIOLATED / NOTHING_CHECKED
        violations: All violations, sorted by (source, target)
        units_analyzed: Units in the snapshot
        units_checked: Units that belong to a source group
        warnings: Configuration warnings (non-fatal)
    """

    rule: DependencyRule
    status: CheckStatus
    violations: tuple[Violation, ...]
    units_analyzed: int
    units_checked: int
    warnings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.units_analyzed < 0:
            raise ValueError(f"units_analyzed must be >= 0, got {self.units_analyzed}")
        if not 0 <= self.units_checked <= self.units_analyzed:
            raise ValueError(
                f"units_checked must be in 0..{self.units_analyzed}, got {self.units_checked}"
            )

        match self.status:
            case CheckStatus.VIOLATED:
                if not self.violations:
                    raise ValueError("VIOLATED result requires violations")
            case CheckStatus.CONFORMANT:
                if self.violations:
                    raise ValueError("CONFORMANT result must not have violations")
                if self.units_checked == 0:
                    raise ValueError("CONFORMANT result requires checked units")
            case CheckStatus.NOTHING_CHECKED:
                if self.violations:
                    raise ValueError("NOTHING_CHECKED result must not have violations")
                if not self.warnings:
                    raise ValueError("NOTHING_CHECKED result requires a warning")

        pairs = [v.pair for v in self.violations]
        if pairs != sorted(set(pairs)):
            raise ValueError("violations must be unique and sorted by (source, target)")

    @property
    def conformant(self) -> bool:
        """Rule applied to at least one unit and nothing was found."""
        return self.status is CheckStatus.CONFORMANT

    @property
    def failed(self) -> bool:
        """At least one violation."""
        return self.status is CheckStatus.VIOLATED

    @property
    def nothing_checked(self) -> bool:
        """Rule applied to no unit."""
        return self.status is CheckStatus.NOTHING_CHECKED

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def violation_pairs(self) -> frozenset[tuple[str, str]]:
        """Set of (offending, referenced) pairs."""
        return frozenset(v.pair for v in self.violations)
