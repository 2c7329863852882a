"""Code unit entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.domain.model.enums import UnitKind

if TYPE_CHECKING:
    from layercheck.domain.model.location import Location
    from layercheck.domain.model.reference import Reference


@dataclass(frozen=True, slots=True)
class CodeUnit:
    """One analyzed program unit: a module or a top-level class.

    Attributes:
        name: Fully qualified name (package.module or package.module.Class)
        namespace: Path segments of the declaring namespace. For a module
            this is its own dotted name, for a class its module's.
        kind: MODULE or CLASS
        location: Definition site
        references: Outbound references to other units
    """

    name: str
    namespace: tuple[str, ...]
    kind: UnitKind
    location: Location
    references: tuple[Reference, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("unit name must not be empty")
        if not self.namespace:
            raise ValueError(f"unit '{self.name}' must have a namespace")
        if any(not segment for segment in self.namespace):
            raise ValueError(f"unit '{self.name}' has empty namespace segment")

        package = ".".join(self.namespace)
        if self.kind is UnitKind.MODULE and package != self.name:
            raise ValueError(f"module '{self.name}' namespace must equal its name, got '{package}'")
        if self.kind is UnitKind.CLASS and not self.name.startswith(f"{package}."):
            raise ValueError(f"class '{self.name}' must be declared inside '{package}'")

        for ref in self.references:
            if ref.target == self.name:
                raise ValueError(f"unit '{self.name}' must not reference itself")

    @property
    def package(self) -> str:
        """Namespace as dotted string."""
        return ".".join(self.namespace)

    @property
    def targets(self) -> frozenset[str]:
        """Names of all referenced targets."""
        return frozenset(ref.target for ref in self.references)

    def references_to(self, target: str) -> tuple[Reference, ...]:
        """All references pointing at target, in source order."""
        return tuple(ref for ref in self.references if ref.target == target)
