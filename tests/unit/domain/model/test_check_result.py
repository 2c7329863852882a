"""Tests for domain/model/check_result.py."""

import pytest

from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.enums import CheckStatus
from layercheck.domain.model.violation import Violation
from tests.factories import make_reference, make_rule


def _violation(source: str, target: str) -> Violation:
    return Violation(
        source=source,
        target=target,
        source_group="service",
        target_group="web",
        references=(make_reference(target),),
    )


def _result(status: CheckStatus, **overrides: object) -> CheckResult:
    fields: dict[str, object] = {
        "rule": make_rule(),
        "status": status,
        "violations": (),
        "units_analyzed": 3,
        "units_checked": 1,
    }
    fields.update(overrides)
    return CheckResult(**fields)  # type: ignore[arg-type]


class TestCheckResultInvariants:
    """Status and violation consistency."""

    def test_violated_requires_violations(self) -> None:
        with pytest.raises(ValueError, match="requires violations"):
            _result(CheckStatus.VIOLATED)

    def test_conformant_rejects_violations(self) -> None:
        with pytest.raises(ValueError, match="must not have violations"):
            _result(CheckStatus.CONFORMANT, violations=(_violation("shop.service.A", "shop.web.B"),))

    def test_conformant_requires_checked_units(self) -> None:
        with pytest.raises(ValueError, match="requires checked units"):
            _result(CheckStatus.CONFORMANT, units_checked=0)

    def test_nothing_checked_requires_warning(self) -> None:
        with pytest.raises(ValueError, match="requires a warning"):
            _result(CheckStatus.NOTHING_CHECKED, units_checked=0)

    def test_checked_cannot_exceed_analyzed(self) -> None:
        with pytest.raises(ValueError, match="units_checked must be in"):
            _result(CheckStatus.CONFORMANT, units_analyzed=1, units_checked=2)

    def test_unsorted_violations_raise(self) -> None:
        violations = (
            _violation("shop.service.B", "shop.web.X"),
            _violation("shop.service.A", "shop.web.X"),
        )

        with pytest.raises(ValueError, match="sorted"):
            _result(CheckStatus.VIOLATED, violations=violations)

    def test_duplicate_pairs_raise(self) -> None:
        violation = _violation("shop.service.A", "shop.web.X")

        with pytest.raises(ValueError, match="unique"):
            _result(CheckStatus.VIOLATED, violations=(violation, violation))


class TestCheckResultProperties:
    """Tests for convenience properties."""

    def test_conformant(self) -> None:
        result = _result(CheckStatus.CONFORMANT)

        assert result.conformant
        assert not result.failed
        assert not result.nothing_checked
        assert result.violation_count == 0

    def test_violated(self) -> None:
        violations = (
            _violation("shop.service.A", "shop.web.X"),
            _violation("shop.service.A", "shop.web.Y"),
        )
        result = _result(CheckStatus.VIOLATED, violations=violations)

        assert result.failed
        assert result.violation_count == 2
        assert result.violation_pairs == frozenset(
            {("shop.service.A", "shop.web.X"), ("shop.service.A", "shop.web.Y")}
        )

    def test_nothing_checked(self) -> None:
        result = _result(CheckStatus.NOTHING_CHECKED, units_checked=0, warnings=("empty",))

        assert result.nothing_checked
        assert result.warnings == ("empty",)
