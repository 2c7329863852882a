"""Tests for domain/model/namespace_pattern.py."""

import pytest

from layercheck.domain.exceptions.configuration import ConfigurationError
from layercheck.domain.model.namespace_pattern import compile_namespace_pattern


class TestCompileNamespacePattern:
    """Pattern syntax and FAIL-FIRST validation."""

    @pytest.mark.parametrize(
        ("pattern", "namespace", "expected"),
        [
            ("shop.web", "shop.web", True),
            ("shop.web", "shop.web.api", False),
            ("shop.service..", "shop.service", True),
            ("shop.service..", "shop.service.orders.impl", True),
            ("shop.service..", "shop.services", False),
            ("shop.service..", "other.shop.service", False),
            ("..web..", "web", True),
            ("..web..", "shop.web", True),
            ("..web..", "shop.web.api", True),
            ("..web..", "shop.webhooks", False),
            ("..web", "shop.web", True),
            ("..web", "shop.web.api", False),
            ("shop..impl", "shop.impl", True),
            ("shop..impl", "shop.service.orders.impl", True),
            ("shop..impl", "shop.service.impl.x", False),
            ("shop.*.api", "shop.web.api", True),
            ("shop.*.api", "shop.web.v1.api", False),
            ("shop.v?", "shop.v1", True),
            ("shop.v?", "shop.v10", False),
        ],
    )
    def test_matching(self, pattern: str, namespace: str, expected: bool) -> None:
        assert compile_namespace_pattern(pattern).match(namespace) is expected

    def test_regex_metacharacters_are_literal(self) -> None:
        pattern = compile_namespace_pattern("shop.a+b")

        assert pattern.match("shop.a+b")
        assert not pattern.match("shop.aab")

    @pytest.mark.parametrize("pattern", ["", "   ", "..", "...."])
    def test_empty_pattern_raises(self, pattern: str) -> None:
        with pytest.raises(ConfigurationError):
            compile_namespace_pattern(pattern)

    @pytest.mark.parametrize("pattern", ["shop.", ".shop", "shop. .web"])
    def test_empty_segment_raises(self, pattern: str) -> None:
        with pytest.raises(ConfigurationError, match="empty segment"):
            compile_namespace_pattern(pattern)

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            compile_namespace_pattern("")

    def test_literal_prefix_stops_at_wildcard(self) -> None:
        assert compile_namespace_pattern("shop.*.api").literal_prefix == ("shop",)
        assert compile_namespace_pattern("..web..").literal_prefix == ()

    def test_subtree_root_only_for_anchored_subtrees(self) -> None:
        assert compile_namespace_pattern("shop.web..").subtree_root == ("shop", "web")
        assert compile_namespace_pattern("shop.web").subtree_root is None
        assert compile_namespace_pattern("..web..").subtree_root is None
        assert compile_namespace_pattern("shop.w*..").subtree_root is None

    def test_none_namespace_raises(self) -> None:
        with pytest.raises(TypeError):
            compile_namespace_pattern("shop").match(None)  # type: ignore[arg-type]

    def test_str_and_repr(self) -> None:
        pattern = compile_namespace_pattern("shop.web..")

        assert str(pattern) == "shop.web.."
        assert repr(pattern) == "NamespacePattern('shop.web..')"


class TestContains:
    """Static containment between patterns."""

    def test_subtree_contains_nested_patterns(self) -> None:
        outer = compile_namespace_pattern("shop..")

        assert outer.contains(compile_namespace_pattern("shop.web.."))
        assert outer.contains(compile_namespace_pattern("shop.web"))
        assert outer.contains(compile_namespace_pattern("shop.w*.api"))

    def test_disjoint_subtrees(self) -> None:
        service = compile_namespace_pattern("shop.service..")

        assert not service.contains(compile_namespace_pattern("shop.web.."))

    def test_unanchored_run_contains_patterns_with_run(self) -> None:
        web = compile_namespace_pattern("..shop.web..")

        assert web.contains(compile_namespace_pattern("shop.web.."))
        assert web.contains(compile_namespace_pattern("acme.shop.web.api"))
        assert web.contains(compile_namespace_pattern("..x*.shop.web.."))
        assert not web.contains(compile_namespace_pattern("shop.service.."))
        assert not web.contains(compile_namespace_pattern("shop..web.."))
        assert not web.contains(compile_namespace_pattern("shop.w*.."))

    def test_unanchored_run_with_wildcard_never_contains(self) -> None:
        web = compile_namespace_pattern("..w*..")

        assert not web.contains(compile_namespace_pattern("shop.web.."))

    def test_identical_patterns_contain_each_other(self) -> None:
        a = compile_namespace_pattern("..web..")
        b = compile_namespace_pattern("..web..")

        assert a.contains(b)
