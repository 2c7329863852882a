"""Reference analyzer: dotted names a code unit depends on.

Walks class bodies and module-level code collecting every Name/Attribute
chain, classified by where it appears:

    class A(Base)            INHERITANCE
    x: Order, def f(o: O)    ANNOTATION (string forward refs included)
    @deco, Factory(), dflt   USAGE

Names are resolved through the module's SymbolTable. Names that are not
bound at module level (builtins, locals, parameters) are skipped.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from layercheck.domain.model.enums import ReferenceKind
from layercheck.domain.model.reference import Reference
from layercheck.infrastructure.analyzers.base import (
    dotted_name,
    make_location,
    parse_forward_reference,
)

if TYPE_CHECKING:
    from pathlib import Path

    from layercheck.domain.model.symbol_table import SymbolTable

# (node, kind, anchor) - anchor carries the position for nodes parsed
# out of string annotations, whose own line numbers are meaningless
_Item = tuple[ast.AST, ReferenceKind, ast.expr | ast.stmt | None]


class ReferenceAnalyzer:
    """Extracts raw references from class and module bodies.

    Stateless analyzer - no state between calls.
    """

    def analyze_class(
        self,
        node: ast.ClassDef,
        path: Path,
        symbol_table: SymbolTable,
    ) -> tuple[Reference, ...]:
        """Collect references of one class, methods included.

        Args:
            node: ClassDef AST node
            path: Source file path
            symbol_table: Names bound in the enclosing module

        Returns:
            References in source order, duplicates removed
        """
        if node is None:
            raise TypeError("node must not be None")
        return self._collect([(node, ReferenceKind.USAGE, None)], path, symbol_table)

    def analyze_statements(
        self,
        body: Iterable[ast.stmt],
        path: Path,
        symbol_table: SymbolTable,
    ) -> tuple[Reference, ...]:
        """Collect references of module-level statements.

        Args:
            body: Statements owned by the module unit (no top-level classes)
            path: Source file path
            symbol_table: Names bound in the module

        Returns:
            References in source order, duplicates removed
        """
        items: list[_Item] = [(stmt, ReferenceKind.USAGE, None) for stmt in body]
        return self._collect(items, path, symbol_table)

    def _collect(
        self,
        items: list[_Item],
        path: Path,
        symbol_table: SymbolTable,
    ) -> tuple[Reference, ...]:
        seen: set[tuple[str, ReferenceKind, int, int]] = set()
        references: list[Reference] = []

        for name, kind, anchor in _walk(items):
            target = symbol_table.resolve(name)
            if target is None:
                continue

            location = make_location(anchor, path)
            key = (target, kind, location.line, location.column)
            if key in seen:
                continue
            seen.add(key)
            references.append(Reference(target=target, kind=kind, location=location))

        references.sort(key=lambda r: r.location.position)
        return tuple(references)


def _walk(items: list[_Item]) -> Iterator[tuple[str, ReferenceKind, ast.expr | ast.stmt]]:
    """Depth-first walk yielding (dotted name, kind, position node)."""
    stack: list[_Item] = list(reversed(items))

    while stack:
        node, kind, anchor = stack.pop()
        children: list[_Item] = []

        match node:
            case ast.Import() | ast.ImportFrom():
                # Handled by ImportAnalyzer
                continue

            case ast.Name(ctx=ast.Load()):
                yield node.id, kind, anchor or node
                continue

            case ast.Attribute(ctx=ast.Load()):
                name = dotted_name(node)
                if name is not None:
                    yield name, kind, anchor or node
                    continue
                children.append((node.value, kind, anchor))

            case ast.Constant(value=str() as text) if kind is ReferenceKind.ANNOTATION:
                parsed = parse_forward_reference(text)
                if parsed is not None:
                    children.append((parsed, kind, anchor or node))

            case ast.ClassDef():
                children.extend((d, ReferenceKind.USAGE, anchor) for d in node.decorator_list)
                children.extend((b, ReferenceKind.INHERITANCE, anchor) for b in node.bases)
                children.extend((k.value, ReferenceKind.USAGE, anchor) for k in node.keywords)
                children.extend((s, ReferenceKind.USAGE, anchor) for s in node.body)

            case ast.FunctionDef() | ast.AsyncFunctionDef():
                children.extend((d, ReferenceKind.USAGE, anchor) for d in node.decorator_list)
                children.extend(_argument_items(node.args, anchor))
                if node.returns is not None:
                    children.append((node.returns, ReferenceKind.ANNOTATION, anchor))
                children.extend((s, ReferenceKind.USAGE, anchor) for s in node.body)

            case ast.AnnAssign():
                children.append((node.annotation, ReferenceKind.ANNOTATION, anchor))
                children.append((node.target, kind, anchor))
                if node.value is not None:
                    children.append((node.value, kind, anchor))

            case _:
                children.extend((child, kind, anchor) for child in ast.iter_child_nodes(node))

        stack.extend(reversed(children))


def _argument_items(args: ast.arguments, anchor: ast.expr | ast.stmt | None) -> list[_Item]:
    """Parameter annotations and defaults of a function signature."""
    items: list[_Item] = []
    params = [*args.posonlyargs, *args.args, *args.kwonlyargs]
    if args.vararg is not None:
        params.append(args.vararg)
    if args.kwarg is not None:
        params.append(args.kwarg)

    for param in params:
        if param.annotation is not None:
            items.append((param.annotation, ReferenceKind.ANNOTATION, anchor))

    defaults = [*args.defaults, *(d for d in args.kw_defaults if d is not None)]
    items.extend((d, ReferenceKind.USAGE, anchor) for d in defaults)
    return items
