"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from layercheck.domain.exceptions.parsing import ParseError
from layercheck.domain.model.location import Location

if TYPE_CHECKING:
    from pathlib import Path


def make_location(node: ast.stmt | ast.expr, path: Path) -> Location:
    """Create Location from AST node.

    Raises:
        ParseError: If node has no line info (FAIL-FIRST)
    """
    lineno = getattr(node, "lineno", None)
    if lineno is None:
        raise ParseError(path, f"{type(node).__name__} node has no line info")

    return Location(file=path, line=lineno, column=node.col_offset)


def compute_module_name(file_path: Path, source_dir: Path, package: str) -> str:
    """Compute fully qualified module name from file path.

    Examples:
        src/shop/orders.py, src/shop, "shop" → shop.orders
        src/shop/web/__init__.py, src/shop, "shop" → shop.web
        src/shop/__init__.py, src/shop, "shop" → shop

    Raises:
        ParseError: If path is outside source_dir or not importable (FAIL-FIRST)
    """
    if not package:
        raise ValueError("package must not be empty")

    try:
        relative = file_path.relative_to(source_dir)
    except ValueError as e:
        raise ParseError(file_path, f"not under {source_dir}") from e

    parts = list(relative.with_suffix("").parts)

    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    for part in parts:
        if not part.isidentifier():
            raise ParseError(file_path, f"'{part}' is not valid Python identifier")

    return ".".join([package, *parts])


def resolve_relative_import(
    node_module: str | None,
    node_level: int,
    current_module: str,
    *,
    is_package: bool = False,
) -> str:
    """Resolve relative import to absolute module path.

    Args:
        node_module: Module part of import (after dots)
        node_level: Number of dots (0=absolute, 1=., 2=..)
        current_module: Current module's fully qualified name
        is_package: Current module is a package __init__, so '.' is itself

    Raises:
        ValueError: If relative import escapes package (FAIL-FIRST)
    """
    if node_level == 0:
        if node_module is None:
            raise ValueError("absolute import must have module")
        return node_module

    parts = current_module.split(".")
    if is_package:
        parts.append("__init__")

    if node_level >= len(parts):
        raise ValueError(
            f"relative import level {node_level} exceeds package depth of module '{current_module}'"
        )

    base_parts = parts[:-node_level]

    if node_module:
        return ".".join([*base_parts, node_module])
    return ".".join(base_parts)


def dotted_name(node: ast.expr) -> str | None:
    """Dotted source name of a Name/Attribute chain.

    Examples:
        views            → "views"
        shop.web.views.X → "shop.web.views.X"
        make().attr      → None

    Returns:
        Dotted name, None if the chain does not start with a plain name
    """
    attrs: list[str] = []
    current = node
    while isinstance(current, ast.Attribute):
        attrs.append(current.attr)
        current = current.value

    match current:
        case ast.Name(id=name):
            return ".".join([name, *reversed(attrs)])
    return None


def parse_forward_reference(text: str) -> ast.expr | None:
    """Parse string annotation ("OrderView", "list[Order]") to expression.

    Returns:
        Expression node, None if the string is not a valid expression
    """
    try:
        return ast.parse(text.strip(), mode="eval").body
    except SyntaxError:
        # Arbitrary strings in annotated positions (Literal["x y"]) are not references
        return None
