"""AST-based source parser adapter.

Implements SourceParserPort using Python AST.
Produces ParsedModule with raw references; resolution against the
snapshot happens in the application layer.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from layercheck.domain.exceptions.parsing import ParseError
from layercheck.domain.model.enums import ReferenceKind
from layercheck.domain.model.parsed_module import ParsedClass, ParsedModule
from layercheck.domain.model.reference import Reference
from layercheck.domain.model.symbol_table import SymbolTable
from layercheck.infrastructure.analyzers.base import make_location
from layercheck.infrastructure.analyzers.import_analyzer import ImportAnalyzer
from layercheck.infrastructure.analyzers.reference_analyzer import ReferenceAnalyzer

if TYPE_CHECKING:
    from pathlib import Path

    from layercheck.domain.model.import_ import Import


class ASTSourceParser:
    """Parser using Python AST to extract dependencies.

    Stateless between parse_file() calls.

    FAIL-FIRST: raises ParseError on any parsing issue.
    """

    def __init__(self) -> None:
        self._import_analyzer = ImportAnalyzer()
        self._reference_analyzer = ReferenceAnalyzer()

    def parse_file(self, path: Path, module_name: str) -> ParsedModule:
        """Parse single Python file.

        Args:
            path: Path to .py file
            module_name: Fully qualified module name

        Returns:
            ParsedModule with module-level and per-class references

        Raises:
            ParseError: If file cannot be read or parsed
        """
        if not module_name:
            raise ValueError("module_name must not be empty")

        # Read file - FAIL-FIRST on file errors
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParseError(path, "file not found") from e
        except PermissionError as e:
            raise ParseError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParseError(path, f"encoding error: {e}") from e

        # Parse AST - FAIL-FIRST on syntax errors
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParseError(path, f"syntax error: {e}") from e

        is_package = path.name == "__init__.py"
        imports = self._import_analyzer.analyze(tree, path, module_name, is_package=is_package)

        symbol_table = SymbolTable(module_name)
        for imp in imports:
            symbol_table.add_import(imp)
        for name in _module_level_names(tree):
            symbol_table.add_local(name)

        class_nodes = [node for node in tree.body if isinstance(node, ast.ClassDef)]
        class_names = {node.name for node in class_nodes}

        classes = tuple(
            ParsedClass(
                name=node.name,
                location=make_location(node, path),
                references=_merge(
                    _import_references(imports, owner=node.name),
                    self._reference_analyzer.analyze_class(node, path, symbol_table),
                ),
            )
            for node in _last_definitions(class_nodes)
        )

        module_statements = [node for node in tree.body if not isinstance(node, ast.ClassDef)]
        module_imports = tuple(
            imp for imp in imports if imp.owner_class is None or imp.owner_class not in class_names
        )

        return ParsedModule(
            name=module_name,
            path=path,
            references=_merge(
                tuple(_import_reference(imp) for imp in module_imports),
                self._reference_analyzer.analyze_statements(module_statements, path, symbol_table),
            ),
            classes=classes,
        )


def _import_reference(imp: Import) -> Reference:
    return Reference(target=imp.target, kind=ReferenceKind.IMPORT, location=imp.location)


def _import_references(imports: tuple[Import, ...], owner: str) -> tuple[Reference, ...]:
    return tuple(_import_reference(imp) for imp in imports if imp.owner_class == owner)


def _merge(*groups: tuple[Reference, ...]) -> tuple[Reference, ...]:
    """Concatenate and order by position, keeping first of equal references."""
    merged = list(dict.fromkeys(ref for group in groups for ref in group))
    merged.sort(key=lambda r: r.location.position)
    return tuple(merged)


def _last_definitions(nodes: list[ast.ClassDef]) -> list[ast.ClassDef]:
    """Keep the last definition of each class name, as Python does at runtime."""
    by_name: dict[str, ast.ClassDef] = {}
    for node in nodes:
        by_name.pop(node.name, None)
        by_name[node.name] = node
    return list(by_name.values())


def _module_level_names(tree: ast.Module) -> tuple[str, ...]:
    """Names defined by top-level statements: classes, functions, assignments.

    Supports both regular and annotated assignments.
    """
    names: list[str] = []

    for node in tree.body:
        match node:
            case ast.ClassDef(name=name) | ast.FunctionDef(name=name) | ast.AsyncFunctionDef(
                name=name
            ):
                names.append(name)

            case ast.Assign(targets=targets):
                for target in targets:
                    if isinstance(target, ast.Name):
                        names.append(target.id)

            case ast.AnnAssign(target=ast.Name(id=name)):
                names.append(name)

    return tuple(names)
