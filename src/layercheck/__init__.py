"""layercheck - layering rules for Python packages, checked by AST analysis."""

__version__ = "0.1.0"

from layercheck.application.rules import services_and_repositories_must_not_depend_on_web
from layercheck.application.services import (
    LayerDependencyChecker,
    assert_conformant,
    build_snapshot,
)
from layercheck.domain.exceptions import (
    ConfigurationError,
    LayerCheckError,
    LayerViolationError,
    NothingCheckedWarning,
    ParseError,
)
from layercheck.domain.model import (
    CheckResult,
    CheckStatus,
    CodeUnit,
    DependencyRule,
    ImportScope,
    PackageGroup,
    Snapshot,
    Violation,
)
from layercheck.presentation.api import assert_layers, check_layers

__all__ = [
    "__version__",
    # Entry points
    "check_layers",
    "assert_layers",
    "build_snapshot",
    "LayerDependencyChecker",
    "assert_conformant",
    "services_and_repositories_must_not_depend_on_web",
    # Model
    "CheckResult",
    "CheckStatus",
    "CodeUnit",
    "DependencyRule",
    "ImportScope",
    "PackageGroup",
    "Snapshot",
    "Violation",
    # Errors
    "LayerCheckError",
    "ConfigurationError",
    "ParseError",
    "LayerViolationError",
    "NothingCheckedWarning",
]
