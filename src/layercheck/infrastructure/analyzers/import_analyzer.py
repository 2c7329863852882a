"""Import statement analyzer."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from layercheck.domain.exceptions.parsing import ParseError
from layercheck.domain.model.import_ import Import
from layercheck.infrastructure.analyzers.base import make_location, resolve_relative_import
from layercheck.infrastructure.analyzers.context import AnalysisContext, ContextType

if TYPE_CHECKING:
    from pathlib import Path


class ImportAnalyzer:
    """Collects every import of a module, attributed to its owning unit.

    No import is skipped: TYPE_CHECKING blocks, try/except fallbacks and
    imports local to a function all create dependencies. An import in a
    class body (or a method) is owned by the top-level class; all others
    are owned by the module.
    """

    def analyze(
        self,
        tree: ast.Module,
        path: Path,
        module_name: str,
        *,
        is_package: bool = False,
    ) -> tuple[Import, ...]:
        """Return imports of tree in source order.

        Relative imports are resolved against module_name; is_package
        marks an __init__ module, whose level-1 base is the package itself.

        Raises:
            ParseError: Relative import climbs above the root package
        """
        collector = _ImportCollector(path, module_name, is_package)
        collector.visit(tree)
        return tuple(collector.found)


class _ImportCollector(ast.NodeVisitor):
    def __init__(self, path: Path, module_name: str, is_package: bool) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        self._path = path
        self._module_name = module_name
        self._is_package = is_package
        self._scopes = AnalysisContext()
        self.found: list[Import] = []

    def _record(self, node: ast.stmt, module: str, name: str | None, asname: str | None,
                level: int = 0) -> None:
        self.found.append(
            Import(
                module=module,
                name=name,
                alias=asname,
                location=make_location(node, self._path),
                level=level,
                owner_class=self._scopes.top_level_class,
            )
        )

    def _visit_in(self, node: ast.AST, ctx_type: ContextType, name: str | None = None) -> None:
        with self._scopes.scope(ctx_type, name):
            self.generic_visit(node)

    def visit_Module(self, node: ast.Module) -> None:
        self._visit_in(node, ContextType.MODULE)

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        self._visit_in(node, ContextType.CLASS, node.name)

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._visit_in(node, ContextType.FUNCTION, node.name)

    visit_AsyncFunctionDef = visit_FunctionDef  # type: ignore[assignment]

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            self._record(node, alias.name, None, alias.asname)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        try:
            target = resolve_relative_import(
                node.module,
                node.level,
                self._module_name,
                is_package=self._is_package,
            )
        except ValueError as e:
            raise ParseError(self._path, f"line {node.lineno}: {e}") from e

        for alias in node.names:
            self._record(node, target, alias.name, alias.asname, node.level)
