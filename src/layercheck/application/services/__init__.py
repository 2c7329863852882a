"""Application services: snapshot building and checking."""

from layercheck.application.services.checker import LayerDependencyChecker, assert_conformant
from layercheck.application.services.snapshot_builder import build_snapshot, snapshot_from_modules

__all__ = [
    "LayerDependencyChecker",
    "assert_conformant",
    "build_snapshot",
    "snapshot_from_modules",
]
