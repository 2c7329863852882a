"""Source file discovery under one package directory."""

from __future__ import annotations

from pathlib import Path

from layercheck.domain.exceptions.configuration import ConfigurationError
from layercheck.domain.model.enums import ImportScope
from layercheck.infrastructure.logging import get_logger

log = get_logger(__name__)

# Directories never analyzed
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        "venv",
        ".git",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        ".eggs",
    },
)

# Directories holding test code
TEST_DIRECTORIES = frozenset({"tests", "test"})


def is_test_path(relative: Path) -> bool:
    """Check if path (relative to the package dir) is test code.

    Test code: any directory named tests/test, files test_*.py,
    *_test.py and conftest.py.
    """
    if any(part in TEST_DIRECTORIES for part in relative.parts[:-1]):
        return True
    name = relative.name
    return name == "conftest.py" or name.startswith("test_") or name.endswith("_test.py")


def discover_source_files(
    source_dir: Path,
    *,
    scope: ImportScope,
    exclude: frozenset[str] = DEFAULT_EXCLUDES,
) -> tuple[Path, ...]:
    """Find all importable .py files under source_dir.

    Args:
        source_dir: Package directory to scan
        scope: Whether test code belongs to the snapshot (required)
        exclude: Directory names to skip

    Returns:
        Sorted tuple of file paths

    Raises:
        ConfigurationError: source_dir is not a directory, or scope missing
    """
    if not isinstance(scope, ImportScope):
        raise ConfigurationError(f"scope must be an ImportScope, got {scope!r}")
    if not source_dir.is_dir():
        raise ConfigurationError(f"source directory does not exist: {source_dir}")

    result: list[Path] = []
    skipped_tests = 0

    for py_file in source_dir.rglob("*.py"):
        relative = py_file.relative_to(source_dir)
        directories = relative.parts[:-1]

        if any(part in exclude for part in directories):
            continue

        # Not importable as part of the package
        if not all(part.isidentifier() for part in directories):
            continue
        if not py_file.stem.isidentifier():
            continue

        if scope is ImportScope.EXCLUDE_TESTS and is_test_path(relative):
            skipped_tests += 1
            continue

        result.append(py_file)

    log.debug(
        "discovery.complete",
        source_dir=str(source_dir),
        files=len(result),
        skipped_tests=skipped_tests,
        scope=scope.name,
    )
    return tuple(sorted(result))
