"""Route registry — normalize raw route declarations into canonical routes.

Raw records come from a manifest, route discovery, or any caller that
already holds them in memory::

    {"path": "/dashboard", "label": "Dashboard",
     "entryPoints": ["/"], "exitPoints": ["/settings"]}

Every path (the route's own and each link reference) goes through
:func:`normalize_path` so that cosmetic differences such as a trailing slash
or letter case never produce false orphans.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from prowl._errors import DuplicatePathError, ManifestError, MissingRootError
from prowl._types import WILDCARD, RawRoutes, RoutePath

# Accepted spellings for the two link declaration styles
_ENTRY_KEYS = ("entryPoints", "entry_points", "entries")
_EXIT_KEYS = ("exitPoints", "exit_points", "exits")
_KNOWN_KEYS = frozenset({"path", "label", "metadata", *_ENTRY_KEYS, *_EXIT_KEYS})

_REPEATED_SLASH = re.compile(r"/{2,}")


@dataclass(frozen=True, slots=True)
class Route:
    """One declared page, in canonical form.

    Attributes:
        path: Canonical URL path, always starting with ``/``.
        label: Display name, or *None*.
        entry_points: Paths declared to link into this route (may include
            the wildcard ``"*"``).
        exit_points: Paths this route declares links out to.
        metadata: Free-form bag, carried through untouched.

    """

    path: RoutePath
    label: str | None = None
    entry_points: frozenset[RoutePath] = frozenset()
    exit_points: frozenset[RoutePath] = frozenset()
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def has_wildcard_entry(self) -> bool:
        """Whether this route is reachable from any external context."""
        return WILDCARD in self.entry_points


def normalize_path(raw: str, *, case_sensitive: bool = False) -> RoutePath:
    """Return the canonical form of a URL path.

    ``""``              -> ``/``
    ``"about/"``        -> ``/about``
    ``"/About//Team"``  -> ``/about/team``  (unless *case_sensitive*)
    ``"/news?page=2"``  -> ``/news``
    ``"*"``             -> ``*``

    """
    path = raw.strip()
    if path == WILDCARD:
        return WILDCARD

    for sep in ("#", "?"):
        path = path.split(sep, maxsplit=1)[0]

    if not path.startswith("/"):
        path = "/" + path
    path = _REPEATED_SLASH.sub("/", path)
    if len(path) > 1:
        path = path.rstrip("/")
    if not case_sensitive:
        path = path.lower()
    return path


def normalize_routes(
    raw_routes: RawRoutes,
    *,
    root_path: str = "/",
    case_sensitive: bool = False,
) -> tuple[Route, ...]:
    """Normalize raw route records into canonical :class:`Route` objects.

    Routes are returned in declaration order.

    Raises:
        ManifestError: A record is not a mapping, lacks a string ``path``,
            or carries unknown keys.
        DuplicatePathError: Two records normalize to the same path.
        MissingRootError: No record normalizes to *root_path*.

    """
    routes: list[Route] = []
    seen: set[RoutePath] = set()
    duplicates: set[RoutePath] = set()

    for position, raw in enumerate(raw_routes):
        route = _normalize_one(raw, position, case_sensitive=case_sensitive)
        if route.path in seen:
            duplicates.add(route.path)
            continue
        seen.add(route.path)
        routes.append(route)

    if duplicates:
        raise DuplicatePathError(tuple(sorted(duplicates)))

    root = normalize_path(root_path, case_sensitive=case_sensitive)
    if root not in seen:
        raise MissingRootError(root)

    return tuple(routes)


def _normalize_one(raw: object, position: int, *, case_sensitive: bool) -> Route:
    """Validate and canonicalize a single raw record."""
    if not isinstance(raw, Mapping):
        msg = f"Route #{position}: expected a mapping, got {type(raw).__name__}"
        raise ManifestError(msg)

    path = raw.get("path")
    if not isinstance(path, str):
        msg = f"Route #{position}: 'path' must be a str, got {type(path).__name__}"
        raise ManifestError(msg)

    unknown = set(raw) - _KNOWN_KEYS
    if unknown:
        msg = f"Route {path!r}: unknown keys {', '.join(sorted(unknown))}"
        raise ManifestError(msg)

    canonical = normalize_path(path, case_sensitive=case_sensitive)
    if canonical == WILDCARD:
        msg = f"Route #{position}: {WILDCARD!r} is reserved and cannot be a route path"
        raise ManifestError(msg)

    label = raw.get("label")
    if label is not None and not isinstance(label, str):
        msg = f"Route {path!r}: 'label' must be a str"
        raise ManifestError(msg)

    metadata = raw.get("metadata") or {}
    if not isinstance(metadata, Mapping):
        msg = f"Route {path!r}: 'metadata' must be a mapping"
        raise ManifestError(msg)

    return Route(
        path=canonical,
        label=label,
        entry_points=_collect_links(raw, _ENTRY_KEYS, path, case_sensitive),
        exit_points=_collect_links(raw, _EXIT_KEYS, path, case_sensitive),
        metadata=MappingProxyType(dict(metadata)),
    )


def _collect_links(
    raw: Mapping[str, Any],
    keys: Iterable[str],
    owner: str,
    case_sensitive: bool,
) -> frozenset[RoutePath]:
    """Union every spelling of a link list into one canonical set."""
    links: set[RoutePath] = set()
    for key in keys:
        values = raw.get(key)
        if values is None:
            continue
        if isinstance(values, str) or not isinstance(values, Iterable):
            msg = f"Route {owner!r}: {key!r} must be a list of paths"
            raise ManifestError(msg)
        for value in values:
            if not isinstance(value, str):
                msg = f"Route {owner!r}: {key!r} entries must be strings"
                raise ManifestError(msg)
            links.add(normalize_path(value, case_sensitive=case_sensitive))
    return frozenset(links)
