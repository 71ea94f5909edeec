"""Prowl application layer — check, path, sitemap and watch.

The engine (``prowl.routes.registry``, ``prowl.graph``, ``prowl.report``)
is pure.  This module does the I/O around it: reading configuration and
the route manifest, optional app-directory discovery, printing summaries
to stderr, and recording events.

Usage::

    import prowl

    result = prowl.check("my-site/")
    prowl.watch("my-site/")
"""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING

from prowl._errors import ProwlError
from prowl.config_loader import load_config
from prowl.graph.builder import NavigationGraph, build_graph
from prowl.graph.depth import compute_depths, shortest_path
from prowl.observability.events import (
    GraphBuilt,
    RoutesLoaded,
    ValidationCompleted,
    ValidationFailed,
    now_ns,
)
from prowl.report.reporter import canonical_root, report_for
from prowl.routes.discovery import discover_routes, merge_routes
from prowl.routes.manifest import load_manifest
from prowl.routes.registry import normalize_path, normalize_routes

if TYPE_CHECKING:
    from prowl._types import RawRoute, RoutePath
    from prowl.config import ProwlConfig
    from prowl.observability.log import EventLog
    from prowl.report.result import ValidationResult


def load_routes(
    config: ProwlConfig,
    *,
    event_log: EventLog | None = None,
) -> tuple[RawRoute, ...]:
    """Read the manifest and merge in discovered pages when enabled."""
    t0 = time.perf_counter()
    declared = load_manifest(config.manifest_path)

    discovered: tuple[RawRoute, ...] = ()
    if config.app_path is not None:
        discovered = discover_routes(config.app_path, strip_segments=config.strip_segments)
    merged = merge_routes(declared, discovered, case_sensitive=config.case_sensitive)

    if event_log is not None:
        event_log.append(RoutesLoaded(
            source=str(config.manifest_path),
            declared=len(declared),
            discovered=len(merged) - len(declared),
            load_ms=(time.perf_counter() - t0) * 1000,
            timestamp_ns=now_ns(),
        ))
    return merged


def load_graph(
    config: ProwlConfig,
    *,
    event_log: EventLog | None = None,
) -> NavigationGraph:
    """Load, normalize and build the navigation graph for *config*."""
    raw = load_routes(config, event_log=event_log)
    t0 = time.perf_counter()
    routes = normalize_routes(
        raw,
        root_path=config.root_path,
        case_sensitive=config.case_sensitive,
    )
    graph = build_graph(routes)

    if event_log is not None:
        event_log.append(GraphBuilt(
            source=str(config.manifest_path),
            nodes=len(graph),
            edges=graph.edge_count,
            build_ms=(time.perf_counter() - t0) * 1000,
            timestamp_ns=now_ns(),
        ))
    return graph


def check(
    root: str | Path = ".",
    *,
    event_log: EventLog | None = None,
    quiet: bool = False,
    **kwargs: object,
) -> ValidationResult:
    """Validate the routes declared under *root*.

    Args:
        root: Project directory holding the manifest and optional prowl.yaml.
        event_log: Optional log that receives load, build and result events.
        quiet: Suppress the stderr summary.
        **kwargs: Override ProwlConfig fields.

    Raises:
        ProwlError: On invalid configuration, manifest or route set.

    """
    try:
        config = load_config(Path(root), **kwargs)
    except ProwlError as exc:
        if not quiet:
            from prowl.banner import print_error

            print_error(exc, root)
        raise
    return check_config(config, event_log=event_log, quiet=quiet)


def check_config(
    config: ProwlConfig,
    *,
    event_log: EventLog | None = None,
    quiet: bool = False,
) -> ValidationResult:
    """Validate with an already-resolved configuration."""
    t0 = time.perf_counter()
    source = str(config.manifest_path)
    try:
        graph = load_graph(config, event_log=event_log)
        result = report_for(graph, config)
    except ProwlError as exc:
        if event_log is not None:
            event_log.append(ValidationFailed(
                source=source,
                error_type=exc.error_type,
                detail=str(exc),
                timestamp_ns=now_ns(),
            ))
        if not quiet:
            from prowl.banner import print_error

            print_error(exc, source)
        raise

    duration_ms = (time.perf_counter() - t0) * 1000
    if event_log is not None:
        event_log.append(ValidationCompleted(
            source=source,
            routes=result.summary.total_routes,
            orphans=result.summary.orphans,
            dead_ends=result.summary.dead_ends,
            cycles=result.summary.cycles,
            health_score=result.health_score,
            duration_ms=duration_ms,
            timestamp_ns=now_ns(),
        ))
    if not quiet:
        from prowl.banner import print_report

        print_report(result, source, load_ms=duration_ms)
    return result


def find_path(
    root: str | Path,
    source: str,
    target: str,
    **kwargs: object,
) -> tuple[RoutePath, ...] | None:
    """Return the shortest link path between two routes, or *None*.

    Both paths are normalized the same way the manifest is.

    Raises:
        UnknownRouteError: If either route is not declared.

    """
    config = load_config(Path(root), **kwargs)
    graph = load_graph(config)
    return shortest_path(
        graph,
        normalize_path(source, case_sensitive=config.case_sensitive),
        normalize_path(target, case_sensitive=config.case_sensitive),
    )


def export_sitemap(
    root: str | Path = ".",
    output: str | Path = "sitemap.xml",
    **kwargs: object,
) -> int | None:
    """Write sitemap.xml for the reachable routes; returns bytes written.

    Returns *None* when ``base_url`` is not configured.

    """
    from prowl.export.sitemap import write_sitemap

    config = load_config(Path(root), **kwargs)
    graph = load_graph(config)
    depths = compute_depths(graph, canonical_root(config))

    out = Path(output)
    if not out.is_absolute():
        out = config.root / out
    size = write_sitemap(
        depths,
        config.base_url,
        out,
        locales=config.locales,
        default_locale=config.default_locale,
    )
    if size is not None:
        print(f"  Sitemap: {out} ({len(depths)} routes, {size} bytes)", file=sys.stderr)
    return size


def watch(
    root: str | Path = ".",
    *,
    event_log: EventLog | None = None,
    **kwargs: object,
) -> None:
    """Validate once, then re-validate whenever declarations change.

    Fatal errors are reported and watching continues, so a half-edited
    manifest does not end the session.  Stops on Ctrl-C.

    """
    from prowl.observability.log import EventLog
    from prowl.watcher import ManifestWatcher

    config = load_config(Path(root), **kwargs)
    event_log = event_log if event_log is not None else EventLog()
    source = str(config.manifest_path)
    _check_and_report(root, source, event_log, kwargs)

    watcher = ManifestWatcher(config)
    watcher.start()
    print(f"  Watching {config.root} for changes...", file=sys.stderr)
    try:
        for batch in watcher.changes():
            names = ", ".join(sorted({event.path.name for event in batch}))
            print(f"  Changed: {names}", file=sys.stderr)
            _check_and_report(root, source, event_log, kwargs)
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()


def _check_and_report(
    root: str | Path,
    source: str,
    event_log: EventLog,
    kwargs: dict[str, object],
) -> None:
    try:
        result = check(root, event_log=event_log, **kwargs)
    except ProwlError:
        # Already printed by check(); keep watching.
        return

    history = event_log.score_history(source)
    if len(history) >= 2 and history[-2] != result.health_score:
        print(
            f"  Score {history[-2]:.1f} -> {result.health_score:.1f}",
            file=sys.stderr,
        )
