"""Tests for prowl.graph.depth — BFS layering and shortest paths."""

from __future__ import annotations

import pytest

from prowl._errors import UnknownRouteError
from prowl.graph.cycles import find_cycles
from prowl.graph.depth import classify_depth, compute_depths, shortest_path
from prowl.graph.reachability import find_orphans


class TestComputeDepths:
    """compute_depths — link distance from the root."""

    def test_layers(self, make_graph, basic_routes) -> None:
        depths = compute_depths(make_graph(basic_routes), "/")
        assert depths == {"/": 0, "/about": 1, "/dashboard": 1, "/settings": 2}

    def test_unreached_nodes_have_no_depth(self, make_graph, basic_routes) -> None:
        assert "/hidden" not in compute_depths(make_graph(basic_routes), "/")

    def test_shortest_layer_wins(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/", "exitPoints": ["/a", "/c"]},
            {"path": "/a", "exitPoints": ["/b"]},
            {"path": "/b", "exitPoints": ["/c"]},
            {"path": "/c"},
        ])
        assert compute_depths(graph, "/")["/c"] == 1

    def test_wildcard_pages_sit_at_depth_one(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/"},
            {"path": "/404", "entryPoints": ["*"], "exitPoints": ["/help"]},
            {"path": "/help"},
        ])
        depths = compute_depths(graph, "/")
        assert depths == {"/": 0, "/404": 1, "/help": 2}
        assert "*" not in depths

    def test_unknown_root(self, make_graph, basic_routes) -> None:
        with pytest.raises(UnknownRouteError):
            compute_depths(make_graph(basic_routes), "/nope")

    def test_acyclic_graph_gives_every_reachable_node_a_depth(
        self, make_graph, basic_routes,
    ) -> None:
        graph = make_graph(basic_routes)
        assert find_cycles(graph) == ()
        orphans = {o.path for o in find_orphans(graph, "/")}
        depths = compute_depths(graph, "/")
        assert set(depths) == graph.nodes - orphans


class TestClassifyDepth:
    """classify_depth — severity bands."""

    @pytest.mark.parametrize(
        ("depth", "expected"),
        [(0, None), (3, None), (4, "MEDIUM"), (5, "HIGH"), (9, "HIGH")],
    )
    def test_default_thresholds(self, depth: int, expected: str | None) -> None:
        assert classify_depth(depth) == expected

    def test_custom_thresholds(self) -> None:
        assert classify_depth(2, high=3, medium=2) == "MEDIUM"
        assert classify_depth(3, high=3, medium=2) == "HIGH"


class TestShortestPath:
    """shortest_path — BFS between arbitrary routes."""

    def test_same_route(self, make_graph, basic_routes) -> None:
        assert shortest_path(make_graph(basic_routes), "/about", "/about") == ("/about",)

    def test_multi_hop(self, make_graph, basic_routes) -> None:
        path = shortest_path(make_graph(basic_routes), "/", "/settings")
        assert path == ("/", "/dashboard", "/settings")

    def test_unreachable_returns_none(self, make_graph, basic_routes) -> None:
        assert shortest_path(make_graph(basic_routes), "/", "/hidden") is None

    def test_direction_matters(self, make_graph, basic_routes) -> None:
        assert shortest_path(make_graph(basic_routes), "/settings", "/") is None

    def test_first_discovered_path_is_deterministic(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/", "exitPoints": ["/b", "/a"]},
            {"path": "/a", "exitPoints": ["/end"]},
            {"path": "/b", "exitPoints": ["/end"]},
            {"path": "/end"},
        ])
        assert shortest_path(graph, "/", "/end") == ("/", "/a", "/end")

    def test_terminates_on_cycles(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/", "exitPoints": ["/a"]},
            {"path": "/a", "exitPoints": ["/"]},
            {"path": "/b"},
        ])
        assert shortest_path(graph, "/", "/b") is None

    def test_unknown_endpoint(self, make_graph, basic_routes) -> None:
        with pytest.raises(UnknownRouteError):
            shortest_path(make_graph(basic_routes), "/", "/nope")
