"""Prowl error hierarchy.

All prowl-specific errors inherit from ProwlError for easy catching.
Structural errors carry the offending paths and serialize to the
``{"type": ..., "detail": ...}`` shape used in reports.
"""

from __future__ import annotations


class ProwlError(Exception):
    """Base error for all prowl operations."""

    error_type = "PROWL_ERROR"

    def to_dict(self) -> dict[str, str]:
        """Serialize as a report error entry."""
        return {"type": self.error_type, "detail": str(self)}


class ConfigError(ProwlError):
    """Invalid or missing configuration."""

    error_type = "CONFIG"


class ManifestError(ConfigError):
    """Unreadable or malformed route manifest."""

    error_type = "MANIFEST"


class RegistryError(ProwlError):
    """The declared route set is structurally invalid."""


class DuplicatePathError(RegistryError):
    """Two or more routes normalize to the same path."""

    error_type = "DUPLICATE_PATH"

    def __init__(self, paths: tuple[str, ...]) -> None:
        self.paths = paths
        joined = ", ".join(repr(p) for p in paths)
        super().__init__(f"Duplicate route path{'s' if len(paths) != 1 else ''}: {joined}")


class MissingRootError(RegistryError):
    """The configured root path has no declared route."""

    error_type = "MISSING_ROOT"

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(f"Root path {root!r} is not declared as a route")


class GraphError(ProwlError):
    """Error while building or querying the navigation graph."""


class DanglingReferenceError(GraphError):
    """A route links to (or from) a path that is not declared.

    Attributes:
        references: ``(route, target)`` pairs, sorted.

    """

    error_type = "DANGLING_REFERENCE"

    def __init__(self, references: tuple[tuple[str, str], ...]) -> None:
        self.references = references
        parts = [f"{route!r} -> {target!r}" for route, target in references]
        super().__init__("Dangling reference: " + "; ".join(parts))


class UnknownRouteError(GraphError):
    """A path was queried that is not a node of the graph."""

    error_type = "UNKNOWN_ROUTE"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Unknown route {path!r}")
