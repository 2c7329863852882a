"""Tests for presentation/api/facade.py."""

from pathlib import Path

import pytest

from layercheck import (
    assert_layers,
    check_layers,
    services_and_repositories_must_not_depend_on_web,
)
from layercheck.domain.exceptions.violation import LayerViolationError, NothingCheckedWarning
from layercheck.domain.model.enums import ImportScope
from layercheck.domain.model.package_group import PackageGroup
from layercheck.domain.model.rule import DependencyRule
from tests.factories import SHOP_FILES, write_package

EXCLUDE = ImportScope.EXCLUDE_TESTS

LEAKY_REPOSITORY = """
    from shop.web import controllers


    class LeakyRepository:
        def load(self):
            return controllers.OrderController
"""


class TestCheckLayers:
    """Tests for check_layers."""

    def test_package_defaults_to_directory_name(self, tmp_path: Path) -> None:
        root = write_package(tmp_path / "shop", SHOP_FILES)

        result = check_layers(root, scope=EXCLUDE)

        assert result.conformant
        assert result.rule.name == "services_and_repositories_must_not_depend_on_web"

    def test_library_use_prints_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        root = write_package(tmp_path / "shop", SHOP_FILES)

        check_layers(root, scope=EXCLUDE)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "snapshot.built" not in captured.err

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        root = write_package(tmp_path / "shop", SHOP_FILES)

        assert check_layers(str(root), scope=EXCLUDE).conformant

    def test_detects_violation(self, tmp_path: Path) -> None:
        files = {**SHOP_FILES, "repository/leaky.py": LEAKY_REPOSITORY}
        root = write_package(tmp_path / "shop", files)

        result = check_layers(root, scope=EXCLUDE)

        assert result.failed
        assert (
            "shop.repository.leaky.LeakyRepository",
            "shop.web.controllers.OrderController",
        ) in result.violation_pairs
        assert ("shop.repository.leaky", "shop.web.controllers") in result.violation_pairs

    def test_custom_rule(self, tmp_path: Path) -> None:
        root = write_package(tmp_path / "shop", SHOP_FILES)
        rule = DependencyRule(
            name="web_is_a_leaf",
            sources=(PackageGroup.of("web", "shop.web.."),),
            forbidden=PackageGroup.of("service", "shop.service.."),
        )

        result = check_layers(root, scope=EXCLUDE, rule=rule)

        assert result.failed
        assert result.rule is rule


class TestAssertLayers:
    """Tests for assert_layers."""

    def test_conformant(self, tmp_path: Path) -> None:
        root = write_package(tmp_path / "shop", SHOP_FILES)

        assert assert_layers(root, scope=EXCLUDE).conformant

    def test_violation_raises(self, tmp_path: Path) -> None:
        files = {**SHOP_FILES, "repository/leaky.py": LEAKY_REPOSITORY}
        root = write_package(tmp_path / "shop", files)

        with pytest.raises(LayerViolationError):
            assert_layers(root, scope=EXCLUDE)

    def test_wrong_package_warns(self, tmp_path: Path) -> None:
        root = write_package(tmp_path / "shop", SHOP_FILES)

        with pytest.warns(NothingCheckedWarning):
            assert_layers(
                root,
                scope=EXCLUDE,
                rule=services_and_repositories_must_not_depend_on_web("store"),
            )
