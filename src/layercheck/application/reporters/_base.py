"""Base reporter class and shared formatting helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from layercheck.domain.model.enums import CheckStatus

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult

STATUS_LABELS = {
    CheckStatus.CONFORMANT: "PASS",
    CheckStatus.VIOLATED: "FAIL",
    CheckStatus.NOTHING_CHECKED: "NOTHING CHECKED",
}


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                print(f"Violations: {result.violation_count}")
    """

    @abstractmethod
    def report(self, result: CheckResult) -> object:
        """Report check results.

        Implementation decides output format and destination.
        """


def status_label(result: CheckResult) -> str:
    """Short status label for summaries."""
    return STATUS_LABELS[result.status]
