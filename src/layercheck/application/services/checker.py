"""Layer dependency checker.

Runs one DependencyRule over one Snapshot: a single linear pass over the
outbound references of units in the source groups. Only direct references
count, no transitive closure is computed.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

from layercheck.domain.exceptions.configuration import OverlappingGroupsError
from layercheck.domain.exceptions.violation import LayerViolationError, NothingCheckedWarning
from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.enums import CheckStatus
from layercheck.domain.model.violation import Violation
from layercheck.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from layercheck.domain.model.code_unit import CodeUnit
    from layercheck.domain.model.package_group import PackageGroup
    from layercheck.domain.model.reference import Reference
    from layercheck.domain.model.rule import DependencyRule
    from layercheck.domain.model.snapshot import Snapshot

log = get_logger(__name__)


class LayerDependencyChecker:
    """Checks that source layers do not reference the forbidden layer.

    Stateless: the same checker can run over any number of snapshots,
    concurrently or not. The snapshot is never mutated.

    Example:
        rule = services_and_repositories_must_not_depend_on_web("shop")
        snapshot = build_snapshot(Path("src/shop"), "shop", scope=ImportScope.EXCLUDE_TESTS)
        result = LayerDependencyChecker(rule).check(snapshot)
        assert_conformant(result)
    """

    def __init__(self, rule: DependencyRule) -> None:
        """Initialize with the rule to enforce.

        Raises:
            TypeError: If rule is None (FAIL-FIRST)
        """
        if rule is None:
            raise TypeError("rule must not be None")
        self._rule = rule

    @property
    def rule(self) -> DependencyRule:
        """Rule this checker enforces."""
        return self._rule

    def check(self, snapshot: Snapshot) -> CheckResult:
        """Run the rule over the snapshot.

        Returns:
            CheckResult with status CONFORMANT, VIOLATED or NOTHING_CHECKED

        Raises:
            OverlappingGroupsError: Some unit belongs to a source group and
                the forbidden group at once. Raised before any violation
                is collected.
        """
        rule = self._rule
        restricted = self._classify(snapshot)

        if snapshot.is_empty:
            return self._nothing_checked(
                snapshot,
                f"namespace root '{snapshot.root_package}' matched no code units",
            )
        if not restricted:
            groups = ", ".join(repr(name) for name in rule.source_names)
            return self._nothing_checked(
                snapshot,
                f"no code unit under '{snapshot.root_package}' belongs to {groups}",
            )

        found: dict[tuple[str, str], list[Reference]] = {}
        groups_of: dict[str, str] = {}

        for unit, group in restricted:
            for ref in unit.references:
                target = snapshot.get(ref.target)
                if target is None or not rule.forbidden.matches(target):
                    continue
                found.setdefault((unit.name, target.name), []).append(ref)
                groups_of[unit.name] = group.name

        violations = tuple(
            Violation(
                source=source,
                target=target,
                source_group=groups_of[source],
                target_group=rule.forbidden.name,
                references=tuple(refs),
            )
            for (source, target), refs in sorted(found.items())
        )

        status = CheckStatus.VIOLATED if violations else CheckStatus.CONFORMANT
        log.debug(
            "check.complete",
            rule=rule.name,
            status=status.name,
            units=len(snapshot),
            checked=len(restricted),
            violations=len(violations),
        )
        return CheckResult(
            rule=rule,
            status=status,
            violations=violations,
            units_analyzed=len(snapshot),
            units_checked=len(restricted),
        )

    def _classify(self, snapshot: Snapshot) -> list[tuple[CodeUnit, PackageGroup]]:
        """Units in a source group, in name order.

        Raises:
            OverlappingGroupsError: Unit matched by source and forbidden group
        """
        restricted: list[tuple[CodeUnit, PackageGroup]] = []
        overlapping: list[str] = []

        for unit in snapshot:
            group = self._rule.source_group_of(unit)
            if group is None:
                continue
            if self._rule.forbidden.matches(unit):
                overlapping.append(unit.name)
                continue
            restricted.append((unit, group))

        if overlapping:
            raise OverlappingGroupsError(self._rule.forbidden.name, overlapping)
        return restricted

    def _nothing_checked(self, snapshot: Snapshot, warning: str) -> CheckResult:
        log.warning("check.nothing_checked", rule=self._rule.name, reason=warning)
        return CheckResult(
            rule=self._rule,
            status=CheckStatus.NOTHING_CHECKED,
            violations=(),
            units_analyzed=len(snapshot),
            units_checked=0,
            warnings=(warning,),
        )


def assert_conformant(result: CheckResult) -> CheckResult:
    """Turn a CheckResult into a test outcome.

    VIOLATED raises, NOTHING_CHECKED warns, CONFORMANT passes.

    Returns:
        The result, unchanged

    Raises:
        LayerViolationError: Result has violations
    """
    if result.failed:
        raise LayerViolationError(result.violations, result.rule.reason)
    if result.nothing_checked:
        for message in result.warnings:
            warnings.warn(message, NothingCheckedWarning, stacklevel=2)
    return result
