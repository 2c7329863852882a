"""Predefined dependency rules."""

from __future__ import annotations

from layercheck.domain.model.package_group import PackageGroup
from layercheck.domain.model.rule import DependencyRule

WEB_LAYER_REASON = "Services and repositories should not depend on web layer"


def services_and_repositories_must_not_depend_on_web(
    root_package: str,
    *,
    service: str = "service",
    repository: str = "repository",
    web: str = "web",
) -> DependencyRule:
    """Services and repositories must not reference the web layer.

    Groups:
        service     <root>.<service>..
        repository  <root>.<repository>..
        web         ..<root>.<web>..

    Args:
        root_package: Root namespace, e.g. "shop"
        service: Sub-package holding services
        repository: Sub-package holding repositories
        web: Sub-package holding the web layer

    Raises:
        ConfigurationError: Empty names or overlapping groups
    """
    return DependencyRule(
        name="services_and_repositories_must_not_depend_on_web",
        sources=(
            PackageGroup.of("service", f"{root_package}.{service}.."),
            PackageGroup.of("repository", f"{root_package}.{repository}.."),
        ),
        forbidden=PackageGroup.of("web", f"..{root_package}.{web}.."),
        reason=WEB_LAYER_REASON,
    )
