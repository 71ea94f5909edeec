"""Navigation graph construction and analyses.

Public API::

    from prowl.graph import build_graph, find_orphans, find_cycles

    graph = build_graph(routes)
    orphans = find_orphans(graph, "/")
"""

from prowl.graph.builder import NavigationGraph, OneSidedLink, build_graph
from prowl.graph.cycles import Cycle, find_cycles
from prowl.graph.depth import classify_depth, compute_depths, shortest_path
from prowl.graph.reachability import (
    DeadEnd,
    Orphan,
    find_dead_ends,
    find_orphans,
    reachable_nodes,
)

__all__ = [
    "Cycle",
    "DeadEnd",
    "NavigationGraph",
    "OneSidedLink",
    "Orphan",
    "build_graph",
    "classify_depth",
    "compute_depths",
    "find_cycles",
    "find_dead_ends",
    "find_orphans",
    "reachable_nodes",
    "shortest_path",
]
