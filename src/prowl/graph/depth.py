"""Depth analysis and shortest paths — breadth-first layering."""

from __future__ import annotations

from collections import deque
from typing import Literal

from prowl._types import RoutePath
from prowl.graph.builder import NavigationGraph

# Defaults for depth severity thresholds
DEPTH_HIGH = 5
DEPTH_MEDIUM = 4


def compute_depths(graph: NavigationGraph, root: RoutePath) -> dict[RoutePath, int]:
    """Return the link distance from *root* to every reachable route.

    The root has depth 0. The wildcard node is seeded at depth 0 as well, so
    a route entered from ``"*"`` sits at depth 1 unless the root reaches it
    sooner. The wildcard itself is omitted, as is every unreachable route.

    Raises:
        UnknownRouteError: If *root* is not a node.

    """
    start = graph.node_id(root)
    depth = {start: 0}
    queue = deque([start])
    if graph.wildcard is not None and graph.wildcard != start:
        depth[graph.wildcard] = 0
        queue.append(graph.wildcard)

    while queue:
        node = queue.popleft()
        for succ in graph.forward[node]:
            if succ not in depth:
                depth[succ] = depth[node] + 1
                queue.append(succ)

    return {
        graph.paths[node]: d
        for node, d in sorted(depth.items())
        if not graph.is_synthetic(node)
    }


def classify_depth(
    depth: int,
    *,
    high: int = DEPTH_HIGH,
    medium: int = DEPTH_MEDIUM,
) -> Literal["HIGH", "MEDIUM"] | None:
    """Map a depth to a warning severity, or *None* when it is acceptable."""
    if depth >= high:
        return "HIGH"
    if depth >= medium:
        return "MEDIUM"
    return None


def shortest_path(
    graph: NavigationGraph,
    source: RoutePath,
    target: RoutePath,
) -> tuple[RoutePath, ...] | None:
    """Return the first shortest link path from *source* to *target*.

    Returns ``(source,)`` when both are the same route, and *None* when
    *target* cannot be reached.

    Raises:
        UnknownRouteError: If either endpoint is not a node.

    """
    start = graph.node_id(source)
    goal = graph.node_id(target)
    if start == goal:
        return (source,)

    parent: dict[int, int] = {start: start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for succ in graph.forward[node]:
            if succ in parent:
                continue
            parent[succ] = node
            if succ == goal:
                return _unwind(graph, parent, goal)
            queue.append(succ)

    return None


def _unwind(graph: NavigationGraph, parent: dict[int, int], goal: int) -> tuple[RoutePath, ...]:
    chain = [goal]
    while parent[chain[-1]] != chain[-1]:
        chain.append(parent[chain[-1]])
    return tuple(graph.paths[node] for node in reversed(chain))
