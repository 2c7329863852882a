"""Outbound reference value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.enums import ReferenceKind
    from layercheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Reference:
    """Direct reference from one code unit to a dotted target.

    Before resolution the target is whatever dotted name the source
    mentions (may point to a function, attribute or external library).
    After resolution it is the name of a CodeUnit in the snapshot.

    Attributes:
        target: Fully qualified dotted name
        kind: How the reference arises
        location: Where in source the reference appears
    """

    target: str
    kind: ReferenceKind
    location: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.target:
            raise ValueError("reference target must not be empty")
        if self.location is None:
            raise TypeError("location must not be None")

    def __str__(self) -> str:
        """Format as kind of target at location."""
        return f"{self.kind.name.lower()} of {self.target} at {self.location}"
