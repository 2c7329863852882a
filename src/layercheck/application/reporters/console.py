"""Console reporter: CheckResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from layercheck.application.reporters._base import BaseReporter, status_label
from layercheck.domain.model.enums import CheckStatus

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult

_STATUS_STYLES = {
    CheckStatus.CONFORMANT: "bold green",
    CheckStatus.VIOLATED: "bold red",
    CheckStatus.NOTHING_CHECKED: "bold yellow",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        color: Emit ANSI colors.
        show_references: List every reference site under each violation.
        max_violations: Max violations to display. None = unlimited.
    """

    width: int = 120
    color: bool = True
    show_references: bool = True
    max_violations: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")
        if self.max_violations is not None and self.max_violations < 1:
            raise ValueError(f"max_violations must be >= 1, got {self.max_violations}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> str:
        """Format check result as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        self._render_header(console, result)

        for warning in result.warnings:
            console.print(f"[yellow]warning:[/yellow] {warning}", highlight=False)

        if result.violations:
            self._render_violations(console, result)

        style = _STATUS_STYLES[result.status]
        console.print(f"[{style}]{status_label(result)}[/{style}]")
        return output.getvalue()

    def _render_header(self, console: Console, result: CheckResult) -> None:
        console.rule(f"[bold]{result.rule.name}[/bold]")
        console.print(result.rule.describe(), highlight=False, markup=False)
        if result.rule.reason:
            console.print(f"[dim]because: {result.rule.reason}[/dim]", highlight=False)
        console.print(
            f"units analyzed: {result.units_analyzed}  "
            f"checked: {result.units_checked}  "
            f"violations: {result.violation_count}",
            highlight=False,
        )

    def _render_violations(self, console: Console, result: CheckResult) -> None:
        violations = result.violations
        if self._config.max_violations is not None:
            violations = violations[: self._config.max_violations]

        table = Table(title=f"Violations ({result.violation_count})", show_lines=True)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Offending unit", style="red")
        table.add_column("Referenced unit", style="magenta")
        if self._config.show_references:
            table.add_column("Where")

        for i, violation in enumerate(violations, start=1):
            row = [str(i), violation.source, violation.target]
            if self._config.show_references:
                row.append(
                    "\n".join(
                        f"{ref.kind.name.lower()} {ref.location}" for ref in violation.references
                    )
                )
            table.add_row(*row)

        console.print(table)

        hidden = result.violation_count - len(violations)
        if hidden > 0:
            console.print(f"[dim]... {hidden} more not shown[/dim]")
