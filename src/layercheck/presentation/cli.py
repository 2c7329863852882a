"""Command line interface for layercheck.

Exit codes:
    0  conformant
    1  violations found
    2  usage or configuration error, unparsable source
    3  nothing checked (configuration warning)
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from layercheck import __version__
from layercheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from layercheck.application.reporters.json_reporter import JsonReporter
from layercheck.application.reporters.plain_text import PlainTextReporter
from layercheck.application.rules import services_and_repositories_must_not_depend_on_web
from layercheck.application.services.checker import LayerDependencyChecker
from layercheck.application.services.snapshot_builder import build_snapshot
from layercheck.domain.exceptions.base import LayerCheckError
from layercheck.domain.model.enums import CheckStatus, ImportScope
from layercheck.infrastructure.logging import configure_logging

EXIT_CODES = {
    CheckStatus.CONFORMANT: 0,
    CheckStatus.VIOLATED: 1,
    CheckStatus.NOTHING_CHECKED: 3,
}
EXIT_ERROR = 2

_SCOPES = {
    "exclude": ImportScope.EXCLUDE_TESTS,
    "include": ImportScope.INCLUDE_TESTS,
}


@click.group()
@click.version_option(version=__version__, prog_name="layercheck")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(verbose: bool, log_json: bool) -> None:
    """layercheck: layering rules for Python packages."""
    configure_logging(verbose=verbose, log_json=log_json)


@cli.command()
@click.argument(
    "source_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--tests",
    "tests",
    type=click.Choice(sorted(_SCOPES)),
    required=True,
    help="Whether test code is part of the analyzed snapshot.",
)
@click.option("-p", "--package", default=None, help="Root package name (default: directory name).")
@click.option("--service", default="service", show_default=True, help="Service sub-package.")
@click.option(
    "--repository", default="repository", show_default=True, help="Repository sub-package."
)
@click.option("--web", default="web", show_default=True, help="Web sub-package.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "rich", "json"]),
    default="text",
    show_default=True,
    help="Report format.",
)
@click.pass_context
def check(
    ctx: click.Context,
    source_dir: Path,
    tests: str,
    package: str | None,
    service: str,
    repository: str,
    web: str,
    output_format: str,
) -> None:
    """Check that services and repositories under SOURCE_DIR do not depend on web."""
    root_package = package or source_dir.resolve().name

    try:
        rule = services_and_repositories_must_not_depend_on_web(
            root_package,
            service=service,
            repository=repository,
            web=web,
        )
        snapshot = build_snapshot(source_dir, root_package, scope=_SCOPES[tests])
        result = LayerDependencyChecker(rule).check(snapshot)
    except LayerCheckError as e:
        click.echo(f"error: {e}", err=True)
        ctx.exit(EXIT_ERROR)

    match output_format:
        case "json":
            click.echo(JsonReporter().report(result))
        case "rich":
            reporter = ConsoleReporter(ConsoleConfig(color=sys.stdout.isatty()))
            click.echo(reporter.report(result), nl=False)
        case _:
            PlainTextReporter().report(result)

    ctx.exit(EXIT_CODES[result.status])


def main() -> None:
    """Console script entry point."""
    cli()
