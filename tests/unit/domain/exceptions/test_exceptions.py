"""Tests for domain/exceptions."""

from pathlib import Path

import pytest

from layercheck.domain.exceptions import (
    ConfigurationError,
    LayerCheckError,
    LayerViolationError,
    NothingCheckedWarning,
    OverlappingGroupsError,
    ParseError,
)
from layercheck.domain.model.violation import Violation
from tests.factories import make_reference


def _violation() -> Violation:
    return Violation(
        source="shop.service.A",
        target="shop.web.B",
        source_group="service",
        target_group="web",
        references=(make_reference("shop.web.B"),),
    )


class TestHierarchy:
    """All errors share LayerCheckError and a builtin base."""

    def test_configuration_error(self) -> None:
        error = ConfigurationError("bad")

        assert isinstance(error, LayerCheckError)
        assert isinstance(error, ValueError)
        assert error.reason == "bad"

    def test_overlapping_groups_is_configuration_error(self) -> None:
        assert issubclass(OverlappingGroupsError, ConfigurationError)

    def test_parse_error_is_syntax_error(self) -> None:
        error = ParseError(Path("a.py"), "invalid syntax")

        assert isinstance(error, SyntaxError)
        assert str(error) == "Failed to parse a.py: invalid syntax"

    def test_violation_error_is_assertion_error(self) -> None:
        assert issubclass(LayerViolationError, AssertionError)
        assert issubclass(LayerViolationError, LayerCheckError)

    def test_nothing_checked_is_user_warning(self) -> None:
        assert issubclass(NothingCheckedWarning, UserWarning)


class TestFailFirst:
    """Exceptions validate their own arguments."""

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must be non-empty"):
            ConfigurationError("")

    def test_parse_error_none_path_raises(self) -> None:
        with pytest.raises(TypeError):
            ParseError(None, "x")  # type: ignore[arg-type]

    def test_overlapping_requires_units(self) -> None:
        with pytest.raises(ValueError, match="at least one unit"):
            OverlappingGroupsError("web", [])

    def test_violation_error_requires_violations(self) -> None:
        with pytest.raises(ValueError, match="at least one violation"):
            LayerViolationError(())


class TestMessages:
    """Exception messages."""

    def test_overlapping_units_sorted(self) -> None:
        error = OverlappingGroupsError("web", ["shop.web.service.B", "shop.service.web.A"])

        assert error.units == ("shop.service.web.A", "shop.web.service.B")
        assert str(error) == (
            "2 unit(s) match both a source group and 'web': "
            "shop.service.web.A, shop.web.service.B"
        )

    def test_violation_error_message(self) -> None:
        error = LayerViolationError((_violation(),), "layers are layers")
        message = str(error)

        assert message.startswith("Found 1 layering violation(s):\n  because: layers are layers\n")
        assert "shop.service.A → shop.web.B (service → web)" in message

    def test_violation_error_without_reason(self) -> None:
        message = str(LayerViolationError((_violation(),)))

        assert "because" not in message
