"""Layering violation exception and warning."""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.domain.exceptions.base import LayerCheckError

if TYPE_CHECKING:
    from layercheck.domain.model.violation import Violation


class LayerViolationError(LayerCheckError, AssertionError):
    """Layering rule violated.

    Raised by assert_conformant() when violations found.
    Inherits AssertionError so test runners report it as a failed assertion.

    Attributes:
        violations: All found violations
        reason: Why the rule exists, if given
    """

    def __init__(self, violations: tuple[Violation, ...], reason: str | None = None) -> None:
        if not violations:
            raise ValueError("LayerViolationError requires at least one violation")

        self.violations = violations
        self.reason = reason

        msg_parts = [f"Found {len(violations)} layering violation(s):"]
        if reason:
            msg_parts.append(f"  because: {reason}")
        for v in violations:
            msg_parts.append(str(v))

        super().__init__("\n".join(msg_parts))


class NothingCheckedWarning(UserWarning):
    """Check ran but no code unit was subject to the rule.

    Configuration warning, not a conformance failure: the namespace root
    matched nothing, or no unit belongs to a source group.
    """
