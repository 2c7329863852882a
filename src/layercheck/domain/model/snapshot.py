"""Snapshot aggregate: all code units of one analysis run."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from layercheck.domain.model.code_unit import CodeUnit
from layercheck.domain.model.enums import UnitKind


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only set of code units under one root namespace.

    Built fresh for each analysis run, never mutated afterwards.

    Attributes:
        root_package: Root namespace the units were discovered under
        units: Unit name -> CodeUnit (read-only view)
        unresolved_count: References dropped during resolution
    """

    root_package: str
    units: Mapping[str, CodeUnit] = field(default_factory=dict)
    unresolved_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants and freeze mapping. FAIL-FIRST."""
        if not self.root_package:
            raise ValueError("root_package must not be empty")
        if self.unresolved_count < 0:
            raise ValueError(f"unresolved_count must be >= 0, got {self.unresolved_count}")

        for key, unit in self.units.items():
            if key != unit.name:
                raise ValueError(f"unit name {unit.name!r} does not match key {key!r}")

        object.__setattr__(self, "units", MappingProxyType(dict(self.units)))

    @classmethod
    def of(cls, root_package: str, units: Iterable[CodeUnit], unresolved_count: int = 0) -> Snapshot:
        """Build snapshot from units.

        Raises:
            ValueError: Duplicate unit names
        """
        mapping: dict[str, CodeUnit] = {}
        for unit in units:
            if unit.name in mapping:
                raise ValueError(f"unit '{unit.name}' already exists in snapshot")
            mapping[unit.name] = unit
        return cls(root_package=root_package, units=mapping, unresolved_count=unresolved_count)

    def __len__(self) -> int:
        return len(self.units)

    def __contains__(self, name: object) -> bool:
        return name in self.units

    def __iter__(self) -> Iterator[CodeUnit]:
        """Iterate units in name order."""
        for name in sorted(self.units):
            yield self.units[name]

    @property
    def is_empty(self) -> bool:
        """No unit was discovered."""
        return not self.units

    def get(self, name: str) -> CodeUnit | None:
        """Get unit by full name. Returns None if not found."""
        return self.units.get(name)

    def modules(self) -> tuple[CodeUnit, ...]:
        """Module units in name order."""
        return tuple(u for u in self if u.kind is UnitKind.MODULE)

    def classes(self) -> tuple[CodeUnit, ...]:
        """Class units in name order."""
        return tuple(u for u in self if u.kind is UnitKind.CLASS)

    @property
    def edge_count(self) -> int:
        """Total number of references across all units."""
        return sum(len(u.references) for u in self.units.values())
