"""Configuration exceptions."""

from __future__ import annotations

from collections.abc import Iterable

from layercheck.domain.exceptions.base import LayerCheckError


class ConfigurationError(LayerCheckError, ValueError):
    """Invalid checker setup.

    Raised before any analysis runs: empty or malformed package groups,
    groups that overlap, missing source directory.
    Inherits ValueError for semantic correctness (invalid argument).

    Attributes:
        reason: Why configuration is invalid
    """

    def __init__(self, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.reason = reason
        super().__init__(reason)


class OverlappingGroupsError(ConfigurationError):
    """Code units fall into a source group and the forbidden group at once.

    Attributes:
        forbidden: Name of the forbidden group
        units: Names of units matched by both sides (sorted)
    """

    def __init__(self, forbidden: str, units: Iterable[str]) -> None:
        self.forbidden = forbidden
        self.units = tuple(sorted(units))
        if not self.units:
            raise ValueError("OverlappingGroupsError requires at least one unit")

        shown = ", ".join(self.units)
        super().__init__(
            f"{len(self.units)} unit(s) match both a source group and '{forbidden}': {shown}"
        )
