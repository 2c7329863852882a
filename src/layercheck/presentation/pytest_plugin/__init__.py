"""pytest plugin for layercheck.

Provides fixtures for layering tests:
    layer_snapshot: Snapshot parsed from the source directory
    layer_rule: Rule to enforce (override in conftest.py)
    layer_checker: LayerDependencyChecker for layer_rule
    layer_result: CheckResult of layer_checker over layer_snapshot

Configuration (pytest.ini or pyproject.toml):
    layercheck_source_dir: Package directory to analyze (default: "src")
    layercheck_package: Root package name (default: directory name)
    layercheck_include_tests: Analyze test code too (default: false)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from layercheck.presentation.pytest_plugin.fixtures import (
    layer_checker,
    layer_result,
    layer_rule,
    layer_snapshot,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "layer_checker",
    "layer_result",
    "layer_rule",
    "layer_snapshot",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "layercheck_source_dir",
        "Package directory analyzed by layercheck fixtures",
        default="src",
    )
    parser.addini(
        "layercheck_package",
        "Root package name (default: source directory name)",
        default="",
    )
    parser.addini(
        "layercheck_include_tests",
        "Analyze test code too",
        type="bool",
        default=False,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "layers: mark test as layering test",
    )
