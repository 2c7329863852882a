"""One-call entry points for scripts and tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from layercheck.application.rules import services_and_repositories_must_not_depend_on_web
from layercheck.application.services.checker import LayerDependencyChecker, assert_conformant
from layercheck.application.services.snapshot_builder import build_snapshot

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult
    from layercheck.domain.model.enums import ImportScope
    from layercheck.domain.model.rule import DependencyRule


def check_layers(
    source_dir: Path | str,
    *,
    scope: ImportScope,
    package: str | None = None,
    rule: DependencyRule | None = None,
) -> CheckResult:
    """Parse source_dir and check it against a layering rule.

    Args:
        source_dir: Root package directory
        scope: Whether test code is analyzed (required, no default)
        package: Root package name (default: directory name)
        rule: Rule to check (default: services and repositories must
            not depend on web)

    Returns:
        CheckResult; never raises for violations

    Raises:
        ConfigurationError: Bad directory, package or rule
        ParseError: Source file cannot be parsed
    """
    path = Path(source_dir)
    root_package = package or path.name
    active_rule = rule or services_and_repositories_must_not_depend_on_web(root_package)

    snapshot = build_snapshot(path, root_package, scope=scope)
    return LayerDependencyChecker(active_rule).check(snapshot)


def assert_layers(
    source_dir: Path | str,
    *,
    scope: ImportScope,
    package: str | None = None,
    rule: DependencyRule | None = None,
) -> CheckResult:
    """check_layers() followed by assert_conformant().

    Raises:
        LayerViolationError: Violations found
    """
    return assert_conformant(check_layers(source_dir, scope=scope, package=package, rule=rule))
