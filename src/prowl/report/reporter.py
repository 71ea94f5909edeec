"""Validation reporter — run every analysis and assemble one result.

``validate()`` is the one-call entry point::

    from prowl import validate

    result = validate(raw_routes, root_path="/", allowed_terminals={"/logout"})
    print(result.health_score)

Structural problems (duplicate paths, dangling references, missing root)
raise before any analysis runs; no partial result is ever returned.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from prowl._types import RawRoutes, RoutePath
from prowl.config import ProwlConfig
from prowl.graph.builder import NavigationGraph, build_graph
from prowl.graph.cycles import find_cycles
from prowl.graph.depth import DEPTH_HIGH, DEPTH_MEDIUM, classify_depth, compute_depths
from prowl.graph.reachability import find_dead_ends, find_orphans
from prowl.report.result import DepthWarning, Finding, ValidationResult, ValidationSummary
from prowl.routes.registry import normalize_path, normalize_routes

# Penalty per finding; cycles are informational and weigh nothing
_ORPHAN_WEIGHT = 2.0
_DEAD_END_WEIGHT = 1.0
_HIGH_DEPTH_WEIGHT = 0.5
_MEDIUM_DEPTH_WEIGHT = 0.25
_ONE_SIDED_WEIGHT = 0.25

_MAX_SCORE = 10.0


def health_score(summary: ValidationSummary) -> float:
    """Return a 0–10 score derived only from *summary*.

    More findings never yield a higher score.
    """
    penalty = (
        summary.orphans * _ORPHAN_WEIGHT
        + summary.dead_ends * _DEAD_END_WEIGHT
        + summary.high_depth * _HIGH_DEPTH_WEIGHT
        + summary.medium_depth * _MEDIUM_DEPTH_WEIGHT
        + summary.one_sided_links * _ONE_SIDED_WEIGHT
    )
    return round(_MAX_SCORE - min(_MAX_SCORE, penalty), 2)


def build_report(
    graph: NavigationGraph,
    root: RoutePath,
    allowed_terminals: Iterable[RoutePath] = (),
    *,
    depth_high: int = DEPTH_HIGH,
    depth_medium: int = DEPTH_MEDIUM,
    strict_links: bool = False,
) -> ValidationResult:
    """Analyze *graph* from *root* and return a :class:`ValidationResult`.

    *root* and *allowed_terminals* must already be canonical paths.
    ``link_warnings`` is only populated when *strict_links* is set.

    """
    orphans = find_orphans(graph, root)
    all_dead_ends = find_dead_ends(graph, allowed_terminals, root=root)
    dead_ends = tuple(d for d in all_dead_ends if not d.allowed)
    cycles = find_cycles(graph)
    depths = compute_depths(graph, root)
    link_warnings = graph.one_sided if strict_links else ()

    depth_warnings: list[DepthWarning] = []
    for path, depth in depths.items():
        severity = classify_depth(depth, high=depth_high, medium=depth_medium)
        if severity is not None:
            depth_warnings.append(DepthWarning(path=path, depth=depth, severity=severity))

    summary = ValidationSummary(
        total_routes=len(graph.routes),
        orphans=len(orphans),
        dead_ends=len(dead_ends),
        allowed_terminals=len(all_dead_ends) - len(dead_ends),
        cycles=len(cycles),
        max_depth=max(depths.values(), default=0),
        high_depth=sum(1 for w in depth_warnings if w.severity == "HIGH"),
        medium_depth=sum(1 for w in depth_warnings if w.severity == "MEDIUM"),
        one_sided_links=len(link_warnings),
    )

    findings: list[Finding] = []
    findings.extend(
        Finding("orphan", o.path, "HIGH", f"not reachable from {root} ({o.reason})")
        for o in orphans
    )
    findings.extend(
        Finding("dead_end", d.path, "MEDIUM", "no outgoing links")
        for d in dead_ends
    )
    findings.extend(
        Finding("depth", w.path, w.severity, f"route nested too deeply (depth {w.depth})")
        for w in depth_warnings
    )
    findings.extend(
        Finding("cycle", cycle[0], "INFO", " -> ".join(cycle))
        for cycle in cycles
    )
    findings.extend(
        Finding(
            "one_sided_link",
            link.source,
            "LOW",
            f"{link.source} -> {link.target} declared by {link.declared_by} only",
        )
        for link in link_warnings
    )

    return ValidationResult(
        summary=summary,
        orphans=orphans,
        dead_ends=dead_ends,
        cycles=cycles,
        depth_warnings=tuple(depth_warnings),
        link_warnings=link_warnings,
        warnings=tuple(findings),
        health_score=health_score(summary),
    )


def validate(
    raw_routes: RawRoutes,
    config: ProwlConfig | None = None,
    **overrides: object,
) -> ValidationResult:
    """Normalize, build and analyze a raw route set in one call.

    Args:
        raw_routes: Raw route records.
        config: Settings to use; defaults to ``ProwlConfig()``.
        **overrides: Replace individual ``ProwlConfig`` fields.

    Raises:
        DuplicatePathError: Two routes share a path.
        MissingRootError: The root path is not declared.
        DanglingReferenceError: A link targets an undeclared path.

    """
    config = config or ProwlConfig()
    if overrides:
        config = dataclasses.replace(config, **overrides)

    routes = normalize_routes(
        raw_routes,
        root_path=config.root_path,
        case_sensitive=config.case_sensitive,
    )
    graph = build_graph(routes)
    return report_for(graph, config)


def report_for(graph: NavigationGraph, config: ProwlConfig) -> ValidationResult:
    """Run :func:`build_report` with settings taken from *config*."""
    return build_report(
        graph,
        canonical_root(config),
        [normalize_path(p, case_sensitive=config.case_sensitive) for p in config.allowed_terminals],
        depth_high=config.depth_high,
        depth_medium=config.depth_medium,
        strict_links=config.strict_links,
    )


def canonical_root(config: ProwlConfig) -> RoutePath:
    """The configured root path in canonical form."""
    return normalize_path(config.root_path, case_sensitive=config.case_sensitive)
