"""pytest fixtures for layering tests.

User overrides layer_rule in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from layercheck.application.rules import services_and_repositories_must_not_depend_on_web
from layercheck.application.services.checker import LayerDependencyChecker
from layercheck.application.services.snapshot_builder import build_snapshot
from layercheck.domain.exceptions.configuration import ConfigurationError
from layercheck.domain.model.enums import ImportScope

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult
    from layercheck.domain.model.rule import DependencyRule
    from layercheck.domain.model.snapshot import Snapshot


def _source_path(config: pytest.Config) -> Path:
    # Note: rootdir exists on pytest.Config but type stubs may not include it
    root_dir = Path(str(getattr(config, "rootdir", ".")))
    source_path = root_dir / str(config.getini("layercheck_source_dir"))

    if not source_path.is_dir():
        raise ConfigurationError(
            f"layercheck_source_dir '{source_path}' does not exist. "
            f"Configure layercheck_source_dir in pytest.ini or pyproject.toml."
        )
    return source_path


def _package_name(config: pytest.Config, source_path: Path) -> str:
    return str(config.getini("layercheck_package")) or source_path.name


@pytest.fixture(scope="session")
def layer_snapshot(request: pytest.FixtureRequest) -> Snapshot:
    """Parse snapshot from the configured source directory.

    Test code is excluded unless layercheck_include_tests is true.
    """
    source_path = _source_path(request.config)
    include_tests = bool(request.config.getini("layercheck_include_tests"))
    scope = ImportScope.INCLUDE_TESTS if include_tests else ImportScope.EXCLUDE_TESTS

    return build_snapshot(source_path, _package_name(request.config, source_path), scope=scope)


@pytest.fixture(scope="session")
def layer_rule(request: pytest.FixtureRequest) -> DependencyRule:
    """Rule to enforce.

    Default: services and repositories must not depend on web.
    Override this fixture in conftest.py for a custom rule.
    """
    source_path = _source_path(request.config)
    return services_and_repositories_must_not_depend_on_web(
        _package_name(request.config, source_path)
    )


@pytest.fixture(scope="session")
def layer_checker(layer_rule: DependencyRule) -> LayerDependencyChecker:
    """Checker for layer_rule."""
    return LayerDependencyChecker(layer_rule)


@pytest.fixture(scope="session")
def layer_result(layer_checker: LayerDependencyChecker, layer_snapshot: Snapshot) -> CheckResult:
    """Result of checking the configured snapshot.

    Use with assert_conformant(layer_result).
    """
    return layer_checker.check(layer_snapshot)
