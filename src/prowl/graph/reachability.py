"""Reachability — orphans and dead-ends.

An orphan is a declared route with no forward path from the root. The
wildcard node counts as reachable by definition, so routes entered from
``"*"`` (and everything they lead to) are never orphans.

A dead-end is a reachable route with no outgoing links. Orphans are never
reported as dead-ends: unreachability dominates.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from prowl._types import RoutePath
from prowl.graph.builder import NavigationGraph


@dataclass(frozen=True, slots=True)
class Orphan:
    """A route unreachable from the root.

    Attributes:
        path: Route path.
        reason: ``no_inbound_links`` when nothing links to the route at all,
            ``unreachable_from_root`` when its linkers are themselves
            unreachable.

    """

    path: RoutePath
    reason: Literal["no_inbound_links", "unreachable_from_root"]


@dataclass(frozen=True, slots=True)
class DeadEnd:
    """A reachable route with no outgoing links."""

    path: RoutePath
    allowed: bool


def reachable_nodes(graph: NavigationGraph, root: RoutePath) -> frozenset[int]:
    """Return node ids reachable from *root* (and from the wildcard node).

    Iterative depth-first traversal with an explicit stack.

    Raises:
        UnknownRouteError: If *root* is not a node.

    """
    start = graph.node_id(root)
    stack = [start]
    visited = {start}
    if graph.wildcard is not None and graph.wildcard not in visited:
        stack.append(graph.wildcard)
        visited.add(graph.wildcard)

    while stack:
        node = stack.pop()
        for succ in graph.forward[node]:
            if succ not in visited:
                visited.add(succ)
                stack.append(succ)

    return frozenset(visited)


def find_orphans(graph: NavigationGraph, root: RoutePath) -> tuple[Orphan, ...]:
    """Return every declared route not reachable from *root*, sorted by path."""
    visited = reachable_nodes(graph, root)
    orphans: list[Orphan] = []
    for node, path in enumerate(graph.paths):
        if node in visited or graph.is_synthetic(node):
            continue
        reason = "unreachable_from_root" if graph.backward[node] else "no_inbound_links"
        orphans.append(Orphan(path=path, reason=reason))
    return tuple(orphans)


def find_dead_ends(
    graph: NavigationGraph,
    allowed_terminals: Iterable[RoutePath] = (),
    *,
    root: RoutePath = "/",
) -> tuple[DeadEnd, ...]:
    """Return reachable routes with no outgoing links, sorted by path.

    Routes listed in *allowed_terminals* are still returned, flagged
    ``allowed=True``; the reporter leaves them out of its dead-end list.

    """
    allowed = frozenset(allowed_terminals)
    visited = reachable_nodes(graph, root)
    return tuple(
        DeadEnd(path=graph.paths[node], allowed=graph.paths[node] in allowed)
        for node in sorted(visited)
        if not graph.forward[node] and not graph.is_synthetic(node)
    )
