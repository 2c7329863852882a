"""Source discovery."""

from layercheck.application.discovery.modules import (
    DEFAULT_EXCLUDES,
    TEST_DIRECTORIES,
    discover_source_files,
    is_test_path,
)

__all__ = [
    "DEFAULT_EXCLUDES",
    "TEST_DIRECTORIES",
    "discover_source_files",
    "is_test_path",
]
