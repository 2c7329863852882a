"""Reporters for check results."""

from layercheck.application.reporters._base import BaseReporter, status_label
from layercheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from layercheck.application.reporters.json_reporter import JsonReporter
from layercheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "status_label",
]
