"""Tests for infrastructure/analyzers/base.py."""

import ast
from pathlib import Path

import pytest

from layercheck.domain.exceptions.parsing import ParseError
from layercheck.infrastructure.analyzers.base import (
    compute_module_name,
    dotted_name,
    make_location,
    parse_forward_reference,
    resolve_relative_import,
)


class TestMakeLocation:
    """Tests for make_location."""

    def test_uses_node_position(self) -> None:
        node = ast.parse("x = 1\n  \ny = 2").body[1]

        loc = make_location(node, Path("a.py"))

        assert (loc.line, loc.column) == (3, 0)

    def test_node_without_line_raises(self) -> None:
        with pytest.raises(ParseError, match="no line info"):
            make_location(ast.Name(id="x", ctx=ast.Load()), Path("a.py"))


class TestComputeModuleName:
    """Tests for compute_module_name."""

    @pytest.mark.parametrize(
        ("relative", "expected"),
        [
            ("orders.py", "shop.orders"),
            ("web/__init__.py", "shop.web"),
            ("__init__.py", "shop"),
            ("service/impl/orders.py", "shop.service.impl.orders"),
        ],
    )
    def test_module_names(self, relative: str, expected: str) -> None:
        source_dir = Path("/src/shop")

        assert compute_module_name(source_dir / relative, source_dir, "shop") == expected

    def test_outside_source_dir_raises(self) -> None:
        with pytest.raises(ParseError, match="not under"):
            compute_module_name(Path("/other/a.py"), Path("/src/shop"), "shop")

    def test_invalid_identifier_raises(self) -> None:
        with pytest.raises(ParseError, match="not valid Python identifier"):
            compute_module_name(Path("/src/shop/my-module.py"), Path("/src/shop"), "shop")

    def test_empty_package_raises(self) -> None:
        with pytest.raises(ValueError, match="package must not be empty"):
            compute_module_name(Path("/src/shop/a.py"), Path("/src/shop"), "")


class TestResolveRelativeImport:
    """Tests for resolve_relative_import."""

    def test_absolute(self) -> None:
        assert resolve_relative_import("shop.web", 0, "shop.service.orders") == "shop.web"

    def test_absolute_without_module_raises(self) -> None:
        with pytest.raises(ValueError, match="must have module"):
            resolve_relative_import(None, 0, "shop.service")

    def test_sibling(self) -> None:
        assert resolve_relative_import("models", 1, "shop.service.orders") == "shop.service.models"

    def test_parent(self) -> None:
        assert resolve_relative_import("web.views", 2, "shop.service.orders") == "shop.web.views"

    def test_dot_only(self) -> None:
        assert resolve_relative_import(None, 1, "shop.service.orders") == "shop.service"

    def test_package_init_dot_is_itself(self) -> None:
        resolved = resolve_relative_import("orders", 1, "shop.service", is_package=True)

        assert resolved == "shop.service.orders"

    def test_escaping_root_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds package depth"):
            resolve_relative_import("x", 3, "shop.service.orders")


class TestDottedName:
    """Tests for dotted_name."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("views", "views"),
            ("shop.web.views.X", "shop.web.views.X"),
            ("make().attr", None),
            ("items[0].name", None),
        ],
    )
    def test_dotted_name(self, source: str, expected: str | None) -> None:
        node = ast.parse(source, mode="eval").body

        assert dotted_name(node) == expected


class TestParseForwardReference:
    """Tests for parse_forward_reference."""

    def test_valid_expression(self) -> None:
        node = parse_forward_reference(" views.OrderView ")

        assert isinstance(node, ast.Attribute)

    def test_invalid_expression_returns_none(self) -> None:
        assert parse_forward_reference("not an expression") is None
