"""Snapshot builder: source directory → Snapshot of CodeUnits.

Explicit graph construction pass: parse every module, then resolve the
raw dotted references against the set of known units.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from layercheck.application.discovery.modules import DEFAULT_EXCLUDES, discover_source_files
from layercheck.domain.exceptions.configuration import ConfigurationError
from layercheck.domain.model.code_unit import CodeUnit
from layercheck.domain.model.enums import UnitKind
from layercheck.domain.model.location import Location
from layercheck.domain.model.reference import Reference
from layercheck.domain.model.snapshot import Snapshot
from layercheck.infrastructure.adapters.ast_parser import ASTSourceParser
from layercheck.infrastructure.analyzers.base import compute_module_name
from layercheck.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from layercheck.domain.model.enums import ImportScope
    from layercheck.domain.model.parsed_module import ParsedModule
    from layercheck.domain.ports.source_parser import SourceParserPort

log = get_logger(__name__)


def build_snapshot(
    source_dir: Path,
    package: str,
    *,
    scope: ImportScope,
    parser: SourceParserPort | None = None,
    exclude: frozenset[str] = DEFAULT_EXCLUDES,
) -> Snapshot:
    """Parse a package directory into a Snapshot.

    Args:
        source_dir: Directory of the root package (e.g. src/shop)
        package: Root package name the directory is imported as
        scope: Whether test code is part of the snapshot (required)
        parser: Source parser, ASTSourceParser by default
        exclude: Directory names to skip

    Returns:
        Snapshot with resolved references

    Raises:
        ConfigurationError: Missing directory, empty or invalid package name
        ParseError: Any file cannot be parsed
    """
    if not package or not all(part.isidentifier() for part in package.split(".")):
        raise ConfigurationError(f"package must be a dotted Python name, got {package!r}")

    files = discover_source_files(source_dir, scope=scope, exclude=exclude)
    source_parser = parser if parser is not None else ASTSourceParser()

    modules = [
        source_parser.parse_file(path, compute_module_name(path, source_dir, package))
        for path in files
    ]
    return snapshot_from_modules(package, modules)


def snapshot_from_modules(root_package: str, modules: Iterable[ParsedModule]) -> Snapshot:
    """Build a Snapshot from parsed modules.

    Every module and every top-level class becomes a CodeUnit. Each raw
    reference is resolved to the most specific known unit; references to
    unknown targets (stdlib, third party) and to the unit itself are dropped.

    Raises:
        ConfigurationError: Two modules or classes share a name
    """
    modules = tuple(modules)

    known: set[str] = set()
    for module in modules:
        if module.name in known:
            raise ConfigurationError(f"module '{module.name}' parsed twice")
        known.add(module.name)
        for cls in module.classes:
            qualified = module.class_name(cls)
            if qualified in known:
                raise ConfigurationError(f"class '{qualified}' shadows module of the same name")
            known.add(qualified)

    resolver = _Resolver(frozenset(known))
    units: list[CodeUnit] = []

    for module in modules:
        namespace = tuple(module.name.split("."))
        units.append(
            CodeUnit(
                name=module.name,
                namespace=namespace,
                kind=UnitKind.MODULE,
                location=Location(file=module.path, line=1, column=0),
                references=resolver.resolve_all(module.name, module.references),
            )
        )
        for cls in module.classes:
            qualified = module.class_name(cls)
            units.append(
                CodeUnit(
                    name=qualified,
                    namespace=namespace,
                    kind=UnitKind.CLASS,
                    location=cls.location,
                    references=resolver.resolve_all(qualified, cls.references),
                )
            )

    snapshot = Snapshot.of(root_package, units, unresolved_count=resolver.unresolved)
    log.debug(
        "snapshot.built",
        root_package=root_package,
        modules=len(modules),
        units=len(snapshot),
        edges=snapshot.edge_count,
        unresolved=resolver.unresolved,
    )
    return snapshot


class _Resolver:
    """Maps dotted targets onto known unit names. Counts misses."""

    def __init__(self, known: frozenset[str]) -> None:
        self._known = known
        self._cache: dict[str, str | None] = {}
        self.unresolved = 0

    def resolve(self, target: str) -> str | None:
        """Longest known prefix of target, by whole segments.

        "shop.web.views.OrderView.get" → "shop.web.views.OrderView"
        """
        if target in self._cache:
            return self._cache[target]

        parts = target.split(".")
        resolved: str | None = None
        for end in range(len(parts), 0, -1):
            candidate = ".".join(parts[:end])
            if candidate in self._known:
                resolved = candidate
                break

        self._cache[target] = resolved
        return resolved

    def resolve_all(self, owner: str, references: tuple[Reference, ...]) -> tuple[Reference, ...]:
        """Resolve references of one unit, dropping unknown and self targets."""
        resolved: dict[Reference, None] = {}
        for ref in references:
            target = self.resolve(ref.target)
            if target is None:
                self.unresolved += 1
                continue
            if target == owner:
                continue
            resolved[Reference(target=target, kind=ref.kind, location=ref.location)] = None
        return tuple(resolved)
