"""Symbol table for name resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.import_ import Import


@dataclass(slots=True)
class SymbolTable:
    """Tracks names bound in one module for resolution.

    Mutable - filled during parsing.

    Handles:
    - import X, import X.Y, import X as Y
    - from X import Y, from X import Y as Z
    - names defined at module level (classes, functions, assignments)
    - from X import * - LIMITATION below

    LIMITATION: star-imported names are not resolved. The star import
    itself is still recorded as an IMPORT reference to X.

    Attributes:
        module_name: Module the table belongs to
        _direct: Local name → fully qualified name mapping
    """

    module_name: str
    _direct: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module_name:
            raise ValueError("module_name must not be empty")

    def add_import(self, imp: Import) -> None:
        """Register import in symbol table."""
        if imp.is_star:
            return
        self._direct[imp.bound_name] = imp.bound_target

    def add_local(self, name: str) -> None:
        """Register a module-level definition."""
        if not name:
            raise ValueError("name must not be empty")
        # Imports win: 'from x import A' followed by 'A = ...' is rare,
        # the reverse order is a re-export
        self._direct.setdefault(name, f"{self.module_name}.{name}")

    def resolve(self, name: str) -> str | None:
        """Resolve local dotted name to fully qualified name.

        Returns:
            Fully qualified name, None if the first segment is not bound
            (builtins, locals, star imports).
        """
        if not name:
            raise ValueError("name must not be empty")

        if name in self._direct:
            return self._direct[name]

        # Attribute chain: resolve first part, append rest
        first, sep, rest = name.partition(".")
        if sep and first in self._direct:
            return f"{self._direct[first]}.{rest}"

        return None
