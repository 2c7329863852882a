"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from collections.abc import Mapping
from pathlib import Path
from textwrap import dedent

from layercheck.domain.model.code_unit import CodeUnit
from layercheck.domain.model.enums import ReferenceKind, UnitKind
from layercheck.domain.model.location import Location
from layercheck.domain.model.package_group import PackageGroup
from layercheck.domain.model.reference import Reference
from layercheck.domain.model.rule import DependencyRule
from layercheck.domain.model.snapshot import Snapshot

# Default test file path - consistent across all tests
DEFAULT_TEST_FILE = Path("/test/file.py")


def make_location(line: int = 1, file: Path = DEFAULT_TEST_FILE) -> Location:
    """Create a Location for tests."""
    return Location(file=file, line=line, column=0)


def make_reference(
    target: str,
    kind: ReferenceKind = ReferenceKind.USAGE,
    line: int = 1,
) -> Reference:
    """Create a Reference for tests."""
    return Reference(target=target, kind=kind, location=make_location(line))


def make_unit(name: str, *targets: str, kind: UnitKind = UnitKind.CLASS) -> CodeUnit:
    """Create a CodeUnit referencing targets.

    Class units live in the namespace of everything before the last dot:
    "shop.service.OrderService" → namespace ("shop", "service").

    Args:
        name: Fully qualified unit name
        targets: Referenced unit names (one USAGE reference each, line 1..n)
        kind: CLASS (default) or MODULE
    """
    if kind is UnitKind.MODULE:
        namespace = tuple(name.split("."))
    else:
        namespace = tuple(name.split(".")[:-1])
    references = tuple(make_reference(t, line=i) for i, t in enumerate(targets, start=1))
    return CodeUnit(
        name=name,
        namespace=namespace,
        kind=kind,
        location=make_location(),
        references=references,
    )


def make_snapshot(
    edges: Mapping[str, tuple[str, ...]],
    root_package: str = "shop",
) -> Snapshot:
    """Create a Snapshot of class units from an adjacency mapping.

    Every name appearing as key or target becomes a unit.

    Example:
        make_snapshot({"shop.service.OrderService": ("shop.web.OrderController",)})
    """
    names = set(edges)
    for targets in edges.values():
        names.update(targets)
    units = [make_unit(name, *edges.get(name, ())) for name in sorted(names)]
    return Snapshot.of(root_package, units)


def make_rule(root: str = "shop") -> DependencyRule:
    """Services and repositories must not depend on web, for root."""
    return DependencyRule(
        name="test_rule",
        sources=(
            PackageGroup.of("service", f"{root}.service.."),
            PackageGroup.of("repository", f"{root}.repository.."),
        ),
        forbidden=PackageGroup.of("web", f"..{root}.web.."),
        reason="Services and repositories should not depend on web layer",
    )


def write_package(root: Path, files: Mapping[str, str]) -> Path:
    """Write a source tree below root.

    Args:
        root: Directory to write into (created if missing)
        files: Relative path → source (dedented)

    Returns:
        root
    """
    for relative, source in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(source).lstrip(), encoding="utf-8")
    return root


# Layered sample project: repository ← service ← web, plus one breach
SHOP_FILES: Mapping[str, str] = {
    "__init__.py": "",
    "web/__init__.py": "",
    "web/controllers.py": """
        from shop.service.orders import OrderService


        class OrderController:
            def __init__(self, service: OrderService) -> None:
                self.service = service
    """,
    "service/__init__.py": "",
    "service/orders.py": """
        from shop.repository.orders import OrderRepository


        class OrderService:
            def __init__(self, repository: OrderRepository) -> None:
                self.repository = repository
    """,
    "repository/__init__.py": "",
    "repository/orders.py": """
        class OrderRepository:
            def find(self, order_id: int) -> dict:
                return {"id": order_id}
    """,
}
