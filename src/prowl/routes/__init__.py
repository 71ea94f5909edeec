"""Route declarations — loading, discovery and normalization.

Public API::

    from prowl.routes import load_manifest, normalize_routes

    raw = load_manifest(Path("my-site/routes.yaml"))
    routes = normalize_routes(raw, root_path="/")
"""

from prowl.routes.discovery import discover_routes, merge_routes
from prowl.routes.manifest import load_manifest
from prowl.routes.registry import Route, normalize_path, normalize_routes

__all__ = [
    "Route",
    "discover_routes",
    "load_manifest",
    "merge_routes",
    "normalize_path",
    "normalize_routes",
]
