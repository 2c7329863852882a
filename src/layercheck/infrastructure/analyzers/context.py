"""Scope tracking while walking a module AST.

Only one question is asked of the scope stack: which top-level class
(if any) owns the node being visited. Imports and references found in
a class body, or in any function nested inside it, belong to that class
unit; everything else belongs to the module unit.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterator


class ContextType(Enum):
    """Kind of scope a frame represents."""

    MODULE = auto()
    CLASS = auto()
    FUNCTION = auto()


_NAMED = frozenset({ContextType.CLASS, ContextType.FUNCTION})


class ContextFrame(NamedTuple):
    """One entered scope: its kind and, for classes and functions, its name."""

    type: ContextType
    name: str | None = None


@dataclass(slots=True)
class AnalysisContext:
    """Stack of entered scopes, outermost first."""

    _frames: list[ContextFrame] = field(default_factory=list)

    def push(self, ctx_type: ContextType, name: str | None = None) -> None:
        """Enter a scope.

        Raises:
            TypeError: ctx_type is not a ContextType
            ValueError: Empty name, or CLASS/FUNCTION without a name
        """
        if not isinstance(ctx_type, ContextType):
            raise TypeError(f"ctx_type must be ContextType, got {type(ctx_type).__name__}")
        if name == "":
            raise ValueError("context name must be non-empty string or None")
        if name is None and ctx_type in _NAMED:
            raise ValueError(f"{ctx_type.name} context requires name")
        self._frames.append(ContextFrame(ctx_type, name))

    def pop(self) -> ContextFrame:
        """Leave the innermost scope and return its frame."""
        if not self._frames:
            raise IndexError("cannot pop from empty context stack")
        return self._frames.pop()

    @contextmanager
    def scope(self, ctx_type: ContextType, name: str | None = None) -> Iterator[None]:
        """Push for the duration of a with-block."""
        self.push(ctx_type, name)
        try:
            yield
        finally:
            self.pop()

    @property
    def top_level_class(self) -> str | None:
        """Name of the module-level class enclosing the current node.

        A class defined inside a function is not a unit, so a module-level
        function always yields None here.
        """
        match self._frames[:2]:
            case [ContextFrame(ContextType.MODULE, _), ContextFrame(ContextType.CLASS, owner)]:
                return owner
            case _:
                return None

    @property
    def depth(self) -> int:
        return len(self._frames)
