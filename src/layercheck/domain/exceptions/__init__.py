"""Domain exceptions."""

from layercheck.domain.exceptions.base import LayerCheckError
from layercheck.domain.exceptions.configuration import (
    ConfigurationError,
    OverlappingGroupsError,
)
from layercheck.domain.exceptions.parsing import ParseError
from layercheck.domain.exceptions.violation import LayerViolationError, NothingCheckedWarning

__all__ = [
    "LayerCheckError",
    "ConfigurationError",
    "OverlappingGroupsError",
    "ParseError",
    "LayerViolationError",
    "NothingCheckedWarning",
]
