"""Namespace patterns for package groups.

Syntax (segments are separated by dots):
    a.b       exactly namespace a.b
    a.b..     a.b and everything below it
    ..web..   any namespace containing segment web
    ..web     any namespace ending with segment web
    a..b      a, then zero or more segments, then b
    *  ?      fnmatch wildcards inside ONE segment (never cross a dot)

Examples:
    "shop.service.."  matches shop.service, shop.service.orders
    "..web.."         matches web, shop.web, shop.web.api, not shop.webhooks
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from layercheck.domain.exceptions.configuration import ConfigurationError

_ANY_PREFIX = r"(?:.*\.)?"
_ANY_SUFFIX = r"(?:\..*)?"
_ANY_MIDDLE = r"(?:\..*)?\."
_WILDCARDS = frozenset("*?")


@dataclass(frozen=True, slots=True)
class NamespacePattern:
    """Compiled namespace pattern.

    Attributes:
        original: Pattern as written
        regex: Compiled regex over the dotted namespace
        literal_prefix: Leading wildcard-free segments every match starts
            with. Empty when the pattern starts with '..'.
        subtree_root: Segments for 'a.b..' patterns, None otherwise
        literal_runs: Maximal runs of consecutive wildcard-free segments
            within one group, in pattern order
        required_run: Segments for '..a.b..' patterns, None otherwise
    """

    original: str
    regex: re.Pattern[str]
    literal_prefix: tuple[str, ...]
    subtree_root: tuple[str, ...] | None
    literal_runs: tuple[tuple[str, ...], ...] = ()
    required_run: tuple[str, ...] | None = None

    def match(self, namespace: str) -> bool:
        """Check if dotted namespace matches pattern."""
        if namespace is None:
            raise TypeError("namespace must not be None")
        return self.regex.fullmatch(namespace) is not None

    def contains(self, other: NamespacePattern) -> bool:
        """Every namespace matched by other is matched by self.

        Decided textually, for two pattern shapes:
        'a..' contains 'a.b..', 'a.b' and 'a.b*.c';
        '..a.b..' contains any pattern with the literal run a.b,
        e.g. 'x.a.b..' and '..a.b.c'.
        """
        if self.original == other.original:
            return True
        if self.subtree_root is not None:
            root = self.subtree_root
            return other.literal_prefix[: len(root)] == root
        if self.required_run is not None:
            return any(_has_run(run, self.required_run) for run in other.literal_runs)
        return False

    def __str__(self) -> str:
        """Return original pattern string."""
        return self.original

    def __repr__(self) -> str:
        """Return repr with original pattern."""
        return f"NamespacePattern({self.original!r})"


def compile_namespace_pattern(pattern: str) -> NamespacePattern:
    """Compile namespace pattern to regex.

    FAIL-FIRST: raises ConfigurationError for empty or malformed patterns.

    Raises:
        ConfigurationError: Empty pattern, bare '..', or empty segment
    """
    if not pattern or not pattern.strip():
        raise ConfigurationError("namespace pattern must not be empty")

    parts = pattern.split("..")
    leading = parts[0] == ""
    trailing = len(parts) > 1 and parts[-1] == ""
    core = parts[1 if leading else 0 : len(parts) - 1 if trailing else len(parts)]

    if not core:
        raise ConfigurationError(f"namespace pattern '{pattern}' names no segment")

    segment_groups: list[list[str]] = []
    for part in core:
        segments = part.split(".")
        if any(not s or not s.strip() for s in segments):
            raise ConfigurationError(f"namespace pattern '{pattern}' has an empty segment")
        segment_groups.append(segments)

    body = _ANY_MIDDLE.join(r"\.".join(_segment_regex(s) for s in g) for g in segment_groups)
    regex = re.compile((_ANY_PREFIX if leading else "") + body + (_ANY_SUFFIX if trailing else ""))

    literal_prefix: tuple[str, ...] = ()
    if not leading:
        first = segment_groups[0]
        literal: list[str] = []
        for segment in first:
            if _WILDCARDS & set(segment):
                break
            literal.append(segment)
        literal_prefix = tuple(literal)

    subtree_root: tuple[str, ...] | None = None
    if not leading and trailing and len(segment_groups) == 1:
        if len(literal_prefix) == len(segment_groups[0]):
            subtree_root = literal_prefix

    runs: list[tuple[str, ...]] = []
    for group in segment_groups:
        run: list[str] = []
        for segment in group:
            if _WILDCARDS & set(segment):
                if run:
                    runs.append(tuple(run))
                run = []
            else:
                run.append(segment)
        if run:
            runs.append(tuple(run))

    required_run: tuple[str, ...] | None = None
    if leading and trailing and runs == [tuple(segment_groups[0])]:
        required_run = runs[0]

    return NamespacePattern(
        original=pattern,
        regex=regex,
        literal_prefix=literal_prefix,
        subtree_root=subtree_root,
        literal_runs=tuple(runs),
        required_run=required_run,
    )


def _segment_regex(segment: str) -> str:
    """Translate one segment, keeping wildcards inside the segment."""
    escaped = re.escape(segment)
    escaped = escaped.replace(r"\*", r"[^.]*")
    return escaped.replace(r"\?", r"[^.]")


def _has_run(segments: tuple[str, ...], run: tuple[str, ...]) -> bool:
    """run occurs in segments as consecutive items."""
    width = len(run)
    return any(segments[i : i + width] == run for i in range(len(segments) - width + 1))
