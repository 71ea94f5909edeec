"""Tests for prowl.graph.reachability — orphans and dead-ends."""

from __future__ import annotations

from prowl.graph.reachability import (
    DeadEnd,
    Orphan,
    find_dead_ends,
    find_orphans,
    reachable_nodes,
)


def _dfs_reachable(forward: dict[str, frozenset[str]], start: str) -> set[str]:
    """Reference reachability used to cross-check the analyzer."""
    seen = {start}
    frontier = [start]
    while frontier:
        for nxt in forward[frontier.pop()]:
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)
    return seen


class TestFindOrphans:
    """find_orphans — routes with no forward path from the root."""

    def test_hidden_route_is_orphan(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        assert find_orphans(graph, "/") == (Orphan("/hidden", "no_inbound_links"),)

    def test_root_never_orphan(self, make_graph) -> None:
        graph = make_graph([{"path": "/"}, {"path": "/a", "exitPoints": ["/"]}])
        orphans = find_orphans(graph, "/")
        assert [o.path for o in orphans] == ["/a"]

    def test_unreachable_linker_reason(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/"},
            {"path": "/island", "exitPoints": ["/island/beach"]},
            {"path": "/island/beach"},
        ])
        assert find_orphans(graph, "/") == (
            Orphan("/island", "no_inbound_links"),
            Orphan("/island/beach", "unreachable_from_root"),
        )

    def test_orphans_complement_reachable_set(self, make_graph, basic_routes) -> None:
        basic_routes.append({"path": "/lost", "exitPoints": ["/about", "/hidden"]})
        graph = make_graph(basic_routes)
        reachable = _dfs_reachable(graph.forward_edges, "/")
        orphans = {o.path for o in find_orphans(graph, "/")}
        assert orphans == graph.nodes - reachable
        assert orphans.isdisjoint(reachable)

    def test_wildcard_entry_never_orphan(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/"},
            {"path": "/landing", "entryPoints": ["*"], "exitPoints": ["/promo"]},
            {"path": "/promo"},
        ])
        assert find_orphans(graph, "/") == ()

    def test_wildcard_node_not_reported(self, make_graph) -> None:
        graph = make_graph([{"path": "/"}, {"path": "/404", "entryPoints": ["*"]}])
        assert all(o.path != "*" for o in find_orphans(graph, "/"))

    def test_large_chain_has_no_recursion_limit(self, make_graph, make_chain) -> None:
        paths = ["/"] + [f"/p{i}" for i in range(5000)]
        graph = make_graph(make_chain(*paths))
        assert find_orphans(graph, "/") == ()
        assert len(reachable_nodes(graph, "/")) == 5001


class TestFindDeadEnds:
    """find_dead_ends — reachable routes with no exits."""

    def test_leaf_pages(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        assert find_dead_ends(graph) == (
            DeadEnd("/about", allowed=False),
            DeadEnd("/settings", allowed=False),
        )

    def test_orphans_are_not_dead_ends(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        assert "/hidden" not in {d.path for d in find_dead_ends(graph)}

    def test_allowed_terminals_flagged(self, make_graph, basic_routes) -> None:
        graph = make_graph(basic_routes)
        dead_ends = find_dead_ends(graph, {"/about"})
        assert DeadEnd("/about", allowed=True) in dead_ends
        assert DeadEnd("/settings", allowed=False) in dead_ends

    def test_wildcard_reached_leaf(self, make_graph) -> None:
        graph = make_graph([
            {"path": "/", "exitPoints": ["/a"]},
            {"path": "/a", "exitPoints": ["/"]},
            {"path": "/404", "entryPoints": ["*"]},
        ])
        assert find_dead_ends(graph) == (DeadEnd("/404", allowed=False),)

    def test_custom_root(self, make_graph) -> None:
        graph = make_graph(
            [{"path": "/en", "exitPoints": ["/en/about"]}, {"path": "/en/about"}],
            root="/en",
        )
        assert find_dead_ends(graph, root="/en") == (DeadEnd("/en/about", allowed=False),)
