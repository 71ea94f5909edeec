"""Validation result types.

A :class:`ValidationResult` is built fresh on every run and never mutated.
``to_dict()`` produces the JSON-serializable report consumed by renderers;
``to_json()`` is byte-stable for an unchanged route set.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal

from prowl._types import RoutePath, Severity
from prowl.graph.builder import OneSidedLink
from prowl.graph.cycles import Cycle
from prowl.graph.reachability import DeadEnd, Orphan


@dataclass(frozen=True, slots=True)
class ValidationSummary:
    """Counts that drive the health score.

    Attributes:
        total_routes: Declared routes (the wildcard node is not counted).
        orphans: Routes unreachable from the root.
        dead_ends: Reachable routes with no exits and not allow-listed.
        allowed_terminals: Reachable routes with no exits that are allow-listed.
        cycles: Cycles found.
        max_depth: Largest link distance from the root.
        high_depth: Routes at or beyond the HIGH depth threshold.
        medium_depth: Routes in the MEDIUM depth band.
        one_sided_links: Edges declared on one side only (strict mode).

    """

    total_routes: int
    orphans: int = 0
    dead_ends: int = 0
    allowed_terminals: int = 0
    cycles: int = 0
    max_depth: int = 0
    high_depth: int = 0
    medium_depth: int = 0
    one_sided_links: int = 0


@dataclass(frozen=True, slots=True)
class DepthWarning:
    """A route nested too deeply below the root."""

    path: RoutePath
    depth: int
    severity: Literal["HIGH", "MEDIUM"]


@dataclass(frozen=True, slots=True)
class Finding:
    """One non-fatal finding in the flat warning list.

    Attributes:
        kind: ``orphan``, ``dead_end``, ``cycle``, ``depth`` or ``one_sided_link``.
        path: Route the finding is about (first path for cycles).
        severity: How much attention it deserves.
        detail: Human-readable explanation.

    """

    kind: Literal["orphan", "dead_end", "cycle", "depth", "one_sided_link"]
    path: RoutePath
    severity: Severity
    detail: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Aggregate output of one validation run."""

    summary: ValidationSummary
    orphans: tuple[Orphan, ...]
    dead_ends: tuple[DeadEnd, ...]
    cycles: tuple[Cycle, ...]
    depth_warnings: tuple[DepthWarning, ...]
    link_warnings: tuple[OneSidedLink, ...]
    warnings: tuple[Finding, ...]
    health_score: float
    errors: tuple[dict[str, str], ...] = ()

    @property
    def ok(self) -> bool:
        """True when there is nothing to warn about."""
        return not self.warnings and not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serializable report."""
        return {
            "routes": {
                "total": self.summary.total_routes,
                "max_depth": self.summary.max_depth,
            },
            "orphans": {
                "count": len(self.orphans),
                "list": [{"path": o.path, "reason": o.reason} for o in self.orphans],
            },
            "dead_ends": {
                "count": len(self.dead_ends),
                "list": [{"path": d.path, "allowed": d.allowed} for d in self.dead_ends],
            },
            "cycles": [list(cycle) for cycle in self.cycles],
            "depth_warnings": [
                {"path": w.path, "depth": w.depth, "severity": w.severity}
                for w in self.depth_warnings
            ],
            "link_warnings": [
                {"source": w.source, "target": w.target, "declared_by": w.declared_by}
                for w in self.link_warnings
            ],
            "warnings": [
                {"kind": f.kind, "path": f.path, "severity": f.severity, "detail": f.detail}
                for f in self.warnings
            ],
            "health_score": self.health_score,
            "errors": [dict(e) for e in self.errors],
        }

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialize the report; identical inputs give identical text."""
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)
