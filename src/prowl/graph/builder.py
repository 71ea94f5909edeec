"""Navigation graph — immutable, index-interned adjacency over route paths.

Every path is interned to a small integer once, in sorted order, and both
edge directions are stored as tuples of sorted index tuples. Analyses work
on indices and translate back to paths only when producing results, so the
same route set always yields the same traversal order.

The two link declaration styles are alternate syntaxes for one edge set::

    {"path": "/", "exitPoints": ["/about"]}       # / -> /about
    {"path": "/about", "entryPoints": ["/"]}      # / -> /about (same edge)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from prowl._errors import DanglingReferenceError, UnknownRouteError
from prowl._types import WILDCARD, RoutePath
from prowl.routes.registry import Route


@dataclass(frozen=True, slots=True)
class OneSidedLink:
    """An edge declared by only one of its two endpoints.

    Attributes:
        source: Linking route.
        target: Linked route.
        declared_by: ``"exit"`` if only the source declared it, ``"entry"``
            if only the target did.

    """

    source: RoutePath
    target: RoutePath
    declared_by: Literal["exit", "entry"]


@dataclass(frozen=True, slots=True)
class NavigationGraph:
    """Directed graph of declared routes.

    Attributes:
        paths: Node paths, indexed by node id (sorted).
        index: Path -> node id.
        forward: Successor ids per node id, sorted.
        backward: Predecessor ids per node id, sorted.
        routes: Path -> declared :class:`Route` (the wildcard has none).
        wildcard: Node id of the synthetic ``"*"`` node, or *None*.
        one_sided: Edges declared on one side only.

    """

    paths: tuple[RoutePath, ...]
    index: Mapping[RoutePath, int]
    forward: tuple[tuple[int, ...], ...]
    backward: tuple[tuple[int, ...], ...]
    routes: Mapping[RoutePath, Route]
    wildcard: int | None
    one_sided: tuple[OneSidedLink, ...] = ()

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, path: object) -> bool:
        return path in self.index

    @property
    def nodes(self) -> frozenset[RoutePath]:
        """All node paths, including the wildcard node when present."""
        return frozenset(self.paths)

    @property
    def edge_count(self) -> int:
        """Number of distinct directed edges."""
        return sum(len(succ) for succ in self.forward)

    @property
    def forward_edges(self) -> dict[RoutePath, frozenset[RoutePath]]:
        """Node path -> paths it links to."""
        return {
            self.paths[i]: frozenset(self.paths[j] for j in succ)
            for i, succ in enumerate(self.forward)
        }

    @property
    def backward_edges(self) -> dict[RoutePath, frozenset[RoutePath]]:
        """Node path -> paths that link to it."""
        return {
            self.paths[i]: frozenset(self.paths[j] for j in pred)
            for i, pred in enumerate(self.backward)
        }

    def node_id(self, path: RoutePath) -> int:
        """Return the node id for *path*.

        Raises:
            UnknownRouteError: If *path* is not a node.

        """
        try:
            return self.index[path]
        except KeyError:
            raise UnknownRouteError(path) from None

    def successors(self, path: RoutePath) -> tuple[RoutePath, ...]:
        """Paths *path* links to, sorted."""
        return tuple(self.paths[j] for j in self.forward[self.node_id(path)])

    def predecessors(self, path: RoutePath) -> tuple[RoutePath, ...]:
        """Paths linking to *path*, sorted."""
        return tuple(self.paths[j] for j in self.backward[self.node_id(path)])

    def edges(self) -> Iterator[tuple[RoutePath, RoutePath]]:
        """Yield every ``(source, target)`` edge in index order."""
        for i, succ in enumerate(self.forward):
            for j in succ:
                yield self.paths[i], self.paths[j]

    def is_synthetic(self, node: int) -> bool:
        """Whether *node* is the wildcard node rather than a declared route."""
        return node == self.wildcard


def build_graph(routes: Sequence[Route]) -> NavigationGraph:
    """Build a :class:`NavigationGraph` from canonical routes.

    Runs in O(V + E). Edges declared several times (by both endpoints, or
    repeatedly) collapse to one.

    Raises:
        DanglingReferenceError: Some link points at an undeclared path. All
            offending ``(route, target)`` pairs are reported together.

    """
    by_path: dict[RoutePath, Route] = {route.path: route for route in routes}
    has_wildcard = any(route.has_wildcard_entry for route in routes)

    paths = sorted([*by_path, WILDCARD] if has_wildcard else by_path)
    index = {path: i for i, path in enumerate(paths)}

    exit_declared: set[tuple[int, int]] = set()
    entry_declared: set[tuple[int, int]] = set()
    dangling: set[tuple[RoutePath, RoutePath]] = set()

    for route in routes:
        me = index[route.path]
        for target in route.exit_points:
            if target == WILDCARD:
                continue
            other = index.get(target)
            if other is None:
                dangling.add((route.path, target))
                continue
            exit_declared.add((me, other))
        for source in route.entry_points:
            other = index.get(source)
            if other is None:
                dangling.add((route.path, source))
                continue
            entry_declared.add((other, me))

    if dangling:
        raise DanglingReferenceError(tuple(sorted(dangling)))

    forward: list[set[int]] = [set() for _ in paths]
    backward: list[set[int]] = [set() for _ in paths]
    for src, dst in exit_declared | entry_declared:
        forward[src].add(dst)
        backward[dst].add(src)

    wildcard = index.get(WILDCARD)
    one_sided = [
        OneSidedLink(paths[src], paths[dst], "exit")
        for src, dst in exit_declared - entry_declared
    ] + [
        OneSidedLink(paths[src], paths[dst], "entry")
        for src, dst in entry_declared - exit_declared
        if src != wildcard
    ]
    one_sided.sort(key=lambda link: (link.source, link.target))

    return NavigationGraph(
        paths=tuple(paths),
        index=MappingProxyType(index),
        forward=tuple(tuple(sorted(succ)) for succ in forward),
        backward=tuple(tuple(sorted(pred)) for pred in backward),
        routes=MappingProxyType(by_path),
        wildcard=wildcard,
        one_sided=tuple(one_sided),
    )
