"""Report banner — colored validation summary on stderr.

Prints the health score, counts and the most important findings after a
run.  Detects ``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from prowl._errors import ProwlError
    from prowl.report.result import ValidationResult


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_RED = "\033[31m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""

# Findings listed per category before eliding the rest
_MAX_LISTED = 5


def _score_color(score: float) -> str:
    if score >= 9.0:
        return _GREEN
    if score >= 6.0:
        return _YELLOW
    return _RED


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _listing(label: str, items: list[str]) -> list[str]:
    if not items:
        return []
    shown = items[:_MAX_LISTED]
    lines = [f"  {_YELLOW}!{_RESET} {label}"]
    lines.extend(f"      {_DIM}{item}{_RESET}" for item in shown)
    if len(items) > len(shown):
        lines.append(f"      {_DIM}... and {len(items) - len(shown)} more{_RESET}")
    return lines


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def print_report(
    result: ValidationResult,
    source: Path | str,
    *,
    load_ms: float = 0.0,
) -> None:
    """Print a validation summary to stderr.

    Args:
        result: The validation result to summarize.
        source: Manifest the routes came from.
        load_ms: Time spent loading and validating in milliseconds.

    """
    from prowl import __version__

    summary = result.summary
    color = _score_color(result.health_score)

    lines: list[str] = [
        "",
        f"  {_BOLD}Prowl{_RESET} {_DIM}v{__version__}{_RESET}  "
        f"{color}{_BOLD}{result.health_score:.1f}/10{_RESET}",
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    lines.append(f"  {_DIM}├─{_RESET} {_plural(summary.total_routes, 'route')} checked{timing}")
    lines.append(f"  {_DIM}├─{_RESET} max depth {summary.max_depth}")
    lines.append(
        f"  {_DIM}├─{_RESET} {_plural(summary.orphans, 'orphan')}, "
        f"{_plural(summary.dead_ends, 'dead-end')}, "
        f"{_plural(summary.cycles, 'cycle')}"
    )
    lines.append(f"  {_DIM}└─{_RESET} source: {_DIM}{source}{_RESET}")

    details: list[str] = []
    details += _listing("orphans", [o.path for o in result.orphans])
    details += _listing("dead-ends", [d.path for d in result.dead_ends])
    details += _listing(
        "too deep",
        [f"{w.path} ({w.depth}, {w.severity})" for w in result.depth_warnings],
    )
    details += _listing("one-sided links", [
        f"{w.source} -> {w.target} ({w.declared_by} only)" for w in result.link_warnings
    ])
    if details:
        lines.append("")
        lines.extend(details)

    if result.ok:
        lines.append("")
        lines.append(f"  {_GREEN}Every route is reachable and has a way out.{_RESET}")

    lines.append("")

    print("\n".join(lines), file=sys.stderr)


def print_error(error: ProwlError, source: Path | str) -> None:
    """Print a fatal validation error to stderr."""
    lines = [
        "",
        f"  {_RED}{_BOLD}✗ {error.error_type}{_RESET}  {_DIM}{source}{_RESET}",
        f"    {error}",
        "",
    ]
    print("\n".join(lines), file=sys.stderr)
