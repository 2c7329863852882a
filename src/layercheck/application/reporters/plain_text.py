"""Plain text report of a layer check, one reference site per line."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from layercheck.application.reporters._base import BaseReporter, status_label

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult
    from layercheck.domain.model.violation import Violation


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text."""
        self._report_header(result)
        self._report_summary(result)

        if result.warnings:
            self._report_warnings(result.warnings)

        if result.violations:
            self._report_violations(result.violations)

        self._report_footer(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self, result: CheckResult) -> None:
        self._write("=" * 70)
        self._write(f"Layer Check: {result.rule.name}")
        self._write("=" * 70)
        self._write(f"Rule: {result.rule.describe()}")
        if result.rule.reason:
            self._write(f"Because: {result.rule.reason}")

    def _report_summary(self, result: CheckResult) -> None:
        self._write()
        self._write("Summary:")
        self._write(f"  Units analyzed: {result.units_analyzed}")
        self._write(f"  Units checked: {result.units_checked}")
        self._write(f"  Violations: {result.violation_count}")
        self._write(f"  Status: {status_label(result)}")

    def _report_warnings(self, warnings: tuple[str, ...]) -> None:
        self._write()
        self._write("Warnings:")
        for warning in warnings:
            self._write(f"  ! {warning}")

    def _report_violations(self, violations: tuple[Violation, ...]) -> None:
        self._write()
        self._write("-" * 70)
        self._write(f"Violations ({len(violations)}):")
        self._write("-" * 70)

        for i, violation in enumerate(violations, start=1):
            self._write()
            self._write(f"{i}. {violation.source} → {violation.target}")
            self._write(f"   {violation.message}")
            for ref in violation.references:
                self._write(f"   - {ref.kind.name.lower()} at {ref.location}")

    def _report_footer(self, result: CheckResult) -> None:
        self._write()
        self._write("=" * 70)
        self._write(f"Result: {status_label(result)}")
        self._write("=" * 70)
