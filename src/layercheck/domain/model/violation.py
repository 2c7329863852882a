"""Layering violation entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.reference import Reference


@dataclass(frozen=True, slots=True)
class Violation:
    """Disallowed direct reference from a restricted layer to a forbidden one.

    Identity is the (source, target) pair; references keep every place in
    source where the breach happens.

    Attributes:
        source: Offending unit name
        target: Referenced unit name
        source_group: Group of the offending unit
        target_group: Forbidden group of the referenced unit
        references: All references from source to target (source order)
    """

    source: str
    target: str
    source_group: str
    target_group: str
    references: tuple[Reference, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")
        if not self.target:
            raise ValueError("target must not be empty")
        if self.source == self.target:
            raise ValueError("source must differ from target")
        if not self.source_group:
            raise ValueError("source_group must not be empty")
        if not self.target_group:
            raise ValueError("target_group must not be empty")
        if not self.references:
            raise ValueError("violation requires at least one reference")
        for ref in self.references:
            if ref.target != self.target:
                raise ValueError(f"reference to {ref.target!r} does not point at {self.target!r}")

    @property
    def pair(self) -> tuple[str, str]:
        """(offending, referenced) identity."""
        return (self.source, self.target)

    @property
    def message(self) -> str:
        """Human-readable violation message."""
        return f"{self.source_group} unit {self.source} depends on {self.target_group} unit {self.target}"

    def __str__(self) -> str:
        """Format violation with every reference site."""
        lines = [f"{self.source} → {self.target} ({self.source_group} → {self.target_group})"]
        lines.extend(f"  {ref}" for ref in self.references)
        return "\n".join(lines)
