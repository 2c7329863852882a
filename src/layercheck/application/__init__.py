"""Application layer: discovery, snapshot building, checking, reporting."""

from layercheck.application.rules import services_and_repositories_must_not_depend_on_web
from layercheck.application.services import (
    LayerDependencyChecker,
    assert_conformant,
    build_snapshot,
    snapshot_from_modules,
)

__all__ = [
    "LayerDependencyChecker",
    "assert_conformant",
    "build_snapshot",
    "services_and_repositories_must_not_depend_on_web",
    "snapshot_from_modules",
]
