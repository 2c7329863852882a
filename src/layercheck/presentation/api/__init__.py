"""Public API for layer checks."""

from layercheck.presentation.api.facade import assert_layers, check_layers

__all__ = ["assert_layers", "check_layers"]
