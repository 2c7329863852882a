"""Parser output: one module with its raw references."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.location import Location
    from layercheck.domain.model.reference import Reference


@dataclass(frozen=True, slots=True)
class ParsedClass:
    """Top-level class with unresolved references.

    Attributes:
        name: Class name (no module prefix)
        location: Definition site
        references: Raw references, targets are dotted names as resolved
            through the module's imports
    """

    name: str
    location: Location
    references: tuple[Reference, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")
        if "." in self.name:
            raise ValueError(f"class name must not be dotted, got {self.name!r}")


@dataclass(frozen=True, slots=True)
class ParsedModule:
    """Single .py file as produced by the source parser.

    Attributes:
        name: Full module name (package.subpackage.module)
        path: File system path
        references: Raw module-level references (imports, module-level code)
        classes: Top-level classes
    """

    name: str
    path: Path
    references: tuple[Reference, ...] = ()
    classes: tuple[ParsedClass, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("module name must not be empty")

        names = [c.name for c in self.classes]
        if len(set(names)) != len(names):
            raise ValueError(f"module '{self.name}' has duplicate top-level classes")

    def class_name(self, cls: ParsedClass) -> str:
        """Fully qualified name of a class in this module."""
        return f"{self.name}.{cls.name}"
