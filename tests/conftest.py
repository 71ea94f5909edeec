"""Shared test fixtures for prowl."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from prowl.graph.builder import NavigationGraph, build_graph
from prowl.routes.registry import normalize_routes


@pytest.fixture
def basic_routes() -> list[dict[str, Any]]:
    """Home, dashboard, about, settings, plus an undeclared-into ``/hidden``.

    ``/hidden`` is an orphan; ``/about`` and ``/settings`` have no exits.
    """
    return [
        {"path": "/", "label": "Home", "exitPoints": ["/dashboard", "/about"]},
        {"path": "/dashboard", "entryPoints": ["/"], "exitPoints": ["/settings"]},
        {"path": "/about", "entryPoints": ["/"]},
        {"path": "/settings", "entryPoints": ["/dashboard"]},
        {"path": "/hidden"},
    ]


@pytest.fixture
def make_graph() -> Callable[..., NavigationGraph]:
    """Return a helper that normalizes raw records and builds a graph."""

    def _make(raw: list[dict[str, Any]], root: str = "/") -> NavigationGraph:
        return build_graph(normalize_routes(raw, root_path=root))

    return _make


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes routes.yaml (and optional prowl.yaml).

    Returns the project root directory.
    """

    def _make(
        routes: list[dict[str, Any]],
        *,
        settings: dict[str, Any] | None = None,
        manifest: str = "routes.yaml",
    ) -> Path:
        (tmp_path / manifest).write_text(yaml.safe_dump({"routes": routes}))
        if settings is not None:
            (tmp_path / "prowl.yaml").write_text(yaml.safe_dump({"prowl": settings}))
        return tmp_path

    return _make


def chain(*paths: str) -> list[dict[str, Any]]:
    """Raw records linking each path to the next; the last one has no exits."""
    records = []
    for i, path in enumerate(paths):
        exits = [paths[i + 1]] if i + 1 < len(paths) else []
        records.append({"path": path, "exitPoints": exits})
    return records


@pytest.fixture
def make_chain() -> Callable[..., list[dict[str, Any]]]:
    """Expose :func:`chain` as a fixture."""
    return chain
