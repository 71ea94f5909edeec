"""Cycle detection — three-color iterative depth-first search.

Cyclic navigation (a "back" link, a shared header) is normal, so cycles are
reported as information rather than errors.
"""

from __future__ import annotations

from typing import TypeAlias

from prowl._types import RoutePath
from prowl.graph.builder import NavigationGraph

_WHITE, _GRAY, _BLACK = 0, 1, 2

Cycle: TypeAlias = tuple[RoutePath, ...]


def find_cycles(graph: NavigationGraph) -> tuple[Cycle, ...]:
    """Return the cycles closed by each back edge found during DFS.

    Each cycle is a closed walk whose first and last entries are the same
    path, e.g. ``("/a", "/b", "/c", "/a")``. A self link yields
    ``("/a", "/a")``. Nodes and successors are visited in index (sorted path)
    order, so the output is deterministic. One cycle is reported per back
    edge; this is not an enumeration of every elementary cycle.

    Runs in O(V + E) with an explicit stack bounded by V.

    """
    color = [_WHITE] * len(graph)
    cycles: list[Cycle] = []

    for start in range(len(graph)):
        if color[start] != _WHITE:
            continue

        # Current DFS path, each node's position in it, and per-frame cursors
        path: list[int] = [start]
        position = {start: 0}
        cursors = [0]
        color[start] = _GRAY

        while path:
            node = path[-1]
            succ = graph.forward[node]
            cursor = cursors[-1]

            if cursor == len(succ):
                color[node] = _BLACK
                del position[node]
                path.pop()
                cursors.pop()
                continue

            cursors[-1] = cursor + 1
            nxt = succ[cursor]
            if color[nxt] == _WHITE:
                color[nxt] = _GRAY
                position[nxt] = len(path)
                path.append(nxt)
                cursors.append(0)
            elif color[nxt] == _GRAY:
                loop = path[position[nxt]:] + [nxt]
                cycles.append(tuple(graph.paths[i] for i in loop))

    return tuple(cycles)
