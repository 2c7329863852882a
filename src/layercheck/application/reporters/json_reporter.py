"""JSON reporter: CheckResult → JSON string.

Machine-readable output for CI tooling.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from layercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult
    from layercheck.domain.model.package_group import PackageGroup
    from layercheck.domain.model.reference import Reference
    from layercheck.domain.model.rule import DependencyRule
    from layercheck.domain.model.violation import Violation


class JsonReporter(BaseReporter):
    """JSON reporter: outputs machine-readable JSON.

    Schema matches domain structure 1:1 with summary added.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: CheckResult) -> str:
        """Format check result as JSON string."""
        data = {
            "status": result.status.name,
            "rule": _rule_to_dict(result.rule),
            "summary": {
                "units_analyzed": result.units_analyzed,
                "units_checked": result.units_checked,
                "violations": result.violation_count,
            },
            "warnings": list(result.warnings),
            "violations": [_violation_to_dict(v) for v in result.violations],
        }
        return json.dumps(data, indent=self._indent)


def _group_to_dict(group: PackageGroup) -> dict[str, object]:
    return {"name": group.name, "patterns": [str(p) for p in group.patterns]}


def _rule_to_dict(rule: DependencyRule) -> dict[str, object]:
    return {
        "name": rule.name,
        "sources": [_group_to_dict(g) for g in rule.sources],
        "forbidden": _group_to_dict(rule.forbidden),
        "reason": rule.reason,
    }


def _reference_to_dict(ref: Reference) -> dict[str, object]:
    return {
        "kind": ref.kind.name,
        "file": str(ref.location.file),
        "line": ref.location.line,
        "column": ref.location.column,
    }


def _violation_to_dict(violation: Violation) -> dict[str, object]:
    return {
        "source": violation.source,
        "target": violation.target,
        "source_group": violation.source_group,
        "target_group": violation.target_group,
        "references": [_reference_to_dict(r) for r in violation.references],
    }
