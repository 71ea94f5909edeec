"""Tests for prowl.graph.builder — NavigationGraph construction."""

from __future__ import annotations

import pytest

from prowl._errors import DanglingReferenceError, UnknownRouteError
from prowl.graph.builder import OneSidedLink, build_graph
from prowl.routes.registry import normalize_routes


class TestBuildGraph:
    """build_graph — nodes, edges and both adjacency directions."""

    def test_nodes_are_route_paths(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        assert graph.nodes == {"/", "/dashboard", "/about", "/settings", "/hidden"}
        assert graph.wildcard is None
        assert len(graph) == 5

    def test_paths_interned_in_sorted_order(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        assert graph.paths == tuple(sorted(graph.paths))
        assert all(graph.index[p] == i for i, p in enumerate(graph.paths))

    def test_exit_and_entry_declarations_union(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        # "/ -> /dashboard" is declared by both endpoints and stored once
        assert graph.successors("/") == ("/about", "/dashboard")
        assert graph.edge_count == 3

    def test_entry_only_declaration_creates_edge(self, make_graph) -> None:
        graph = make_graph([{"path": "/"}, {"path": "/a", "entryPoints": ["/"]}])
        assert graph.successors("/") == ("/a",)
        assert graph.predecessors("/a") == ("/",)

    def test_forward_and_backward_are_inverse(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        forward = graph.forward_edges
        backward = graph.backward_edges
        for source, targets in forward.items():
            for target in targets:
                assert source in backward[target]
        for target, sources in backward.items():
            for source in sources:
                assert target in forward[source]

    def test_edges_iterates_every_edge(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        assert list(graph.edges()) == [
            ("/", "/about"),
            ("/", "/dashboard"),
            ("/dashboard", "/settings"),
        ]

    def test_self_link_kept(self, make_graph) -> None:
        graph = make_graph([{"path": "/", "exitPoints": ["/"]}])
        assert graph.successors("/") == ("/",)

    def test_contains(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        assert "/about" in graph
        assert "/nope" not in graph

    def test_unknown_route_query(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        with pytest.raises(UnknownRouteError):
            graph.successors("/nope")

    def test_graph_is_frozen(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        with pytest.raises(AttributeError):
            graph.wildcard = 3  # type: ignore[misc]
        with pytest.raises(TypeError):
            graph.index["/x"] = 9  # type: ignore[index]


class TestWildcard:
    """The wildcard entry point becomes one synthetic node."""

    def test_wildcard_node_added(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/"},
            {"path": "/404", "entryPoints": ["*"]},
            {"path": "/500", "entryPoints": ["*"]},
        ])
        assert "*" in graph.nodes
        assert graph.wildcard == graph.index["*"]
        assert graph.successors("*") == ("/404", "/500")
        assert graph.is_synthetic(graph.wildcard)

    def test_wildcard_not_a_route(self, make_graph) -> None:
        graph = make_graph([{"path": "/"}, {"path": "/404", "entryPoints": ["*"]}])
        assert "*" not in graph.routes
        assert len(graph.routes) == 2

    def test_wildcard_exit_is_ignored(self, make_graph) -> None:
        graph = make_graph([{"path": "/", "exitPoints": ["*"]}])
        assert graph.wildcard is None
        assert graph.successors("/") == ()


class TestDanglingReferences:
    """Unknown link targets are fatal."""

    def test_dangling_exit(self) -> None:
        routes = normalize_routes([{"path": "/"}, {"path": "/y", "exitPoints": ["/nonexistent"]}])
        with pytest.raises(DanglingReferenceError) as exc_info:
            build_graph(routes)
        assert exc_info.value.references == (("/y", "/nonexistent"),)
        assert "/y" in str(exc_info.value)
        assert "/nonexistent" in str(exc_info.value)

    def test_dangling_entry(self) -> None:
        routes = normalize_routes([{"path": "/"}, {"path": "/y", "entryPoints": ["/ghost"]}])
        with pytest.raises(DanglingReferenceError) as exc_info:
            build_graph(routes)
        assert exc_info.value.references == (("/y", "/ghost"),)

    def test_all_dangling_references_reported(self) -> None:
        routes = normalize_routes([
            {"path": "/", "exitPoints": ["/b", "/a"]},
            {"path": "/z", "entryPoints": ["/c"]},
        ])
        with pytest.raises(DanglingReferenceError) as exc_info:
            build_graph(routes)
        assert exc_info.value.references == (("/", "/a"), ("/", "/b"), ("/z", "/c"))


class TestOneSidedLinks:
    """Edges declared by only one endpoint are recorded for strict audits."""

    def test_exit_only(self, make_graph) -> None:
        graph = make_graph([{"path": "/", "exitPoints": ["/a"]}, {"path": "/a"}])
        assert graph.one_sided == (OneSidedLink("/", "/a", "exit"),)

    def test_entry_only(self, make_graph) -> None:
        graph = make_graph([{"path": "/"}, {"path": "/a", "entryPoints": ["/"]}])
        assert graph.one_sided == (OneSidedLink("/", "/a", "entry"),)

    def test_both_sides_agree(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/", "exitPoints": ["/a"]},
            {"path": "/a", "entryPoints": ["/"]},
        ])
        assert graph.one_sided == ()

    def test_wildcard_edges_excluded(self, make_graph) -> None:
        graph = make_graph([{"path": "/"}, {"path": "/404", "entryPoints": ["*"]}])
        assert graph.one_sided == ()
