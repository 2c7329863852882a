"""Reporter protocol for output formatting.

Users implement this Protocol for custom output formats.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Reporters format CheckResult for output. Whether they write to a
    stream or return a string is up to the implementation.

    Example:
        class MarkdownReporter:
            def report(self, result: CheckResult) -> str:
                return "\\n".join(f"- {v.source} → {v.target}" for v in result.violations)
    """

    def report(self, result: CheckResult) -> object:
        """Report check results.

        Args:
            result: Complete check result
        """
        ...
