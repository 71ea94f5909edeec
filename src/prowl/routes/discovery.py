"""Route discovery — derive page paths from an app-router directory tree.

Follows the Next.js ``app/`` convention, where every ``page`` file defines
a route at its directory's position:

    app/page.tsx                         -> /
    app/[locale]/about/team/page.tsx     -> /about/team   (``[locale]`` stripped)
    app/(marketing)/pricing/page.tsx     -> /pricing      (route group dropped)
    app/blog/[slug]/page.tsx             -> /blog/[slug]
    app/_components/page.tsx             -> skipped       (private folder)
    app/@modal/login/page.tsx            -> skipped       (parallel slot)

Only paths are discovered. Links are never inferred from source code; they
come from the route manifest.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from prowl._types import RawRoute
from prowl.routes.registry import normalize_path

# File stems and suffixes recognised as page definitions
_PAGE_STEM = "page"
_PAGE_SUFFIXES: frozenset[str] = frozenset({".tsx", ".ts", ".jsx", ".js", ".mdx"})


def discover_routes(
    app_dir: Path,
    *,
    strip_segments: Iterable[str] = ("[locale]",),
) -> tuple[RawRoute, ...]:
    """Scan *app_dir* for page files and return link-less route records.

    Returns an empty tuple when *app_dir* does not exist. Records are sorted
    by path and carry a derived ``label``.

    """
    if not app_dir.is_dir():
        return ()

    strip = frozenset(strip_segments)
    found: dict[str, RawRoute] = {}

    for page_file in sorted(app_dir.rglob(f"{_PAGE_STEM}.*")):
        if page_file.suffix not in _PAGE_SUFFIXES or not page_file.is_file():
            continue
        segments = page_file.parent.relative_to(app_dir).parts
        if any(_is_hidden_segment(s) for s in segments):
            continue
        path = _derive_path(segments, strip)
        found.setdefault(path, {"path": path, "label": _derive_label(path)})

    return tuple(found[path] for path in sorted(found))


def merge_routes(
    declared: Iterable[RawRoute],
    discovered: Iterable[RawRoute],
    *,
    case_sensitive: bool = False,
) -> tuple[RawRoute, ...]:
    """Append discovered routes that the manifest does not declare.

    Paths are compared in the registry's canonical form, so ``About/``
    in the manifest matches a discovered ``/about``.
    """
    declared = tuple(declared)
    known = {_merge_key(r, case_sensitive) for r in declared}
    return declared + tuple(
        r for r in discovered if _merge_key(r, case_sensitive) not in known
    )


def _merge_key(record: RawRoute, case_sensitive: bool) -> str:
    return normalize_path(str(record.get("path", "")), case_sensitive=case_sensitive)


def _is_hidden_segment(segment: str) -> bool:
    """Private folders (``_x``) and parallel slots (``@x``) are not routes."""
    return segment.startswith(("_", "@"))


def _derive_path(segments: tuple[str, ...], strip: frozenset[str]) -> str:
    """Turn directory segments into a URL path.

    Route groups ``(name)`` never appear in URLs; stripped segments are only
    removed in leading position.
    """
    parts = [s for s in segments if not (s.startswith("(") and s.endswith(")"))]
    while parts and parts[0] in strip:
        parts.pop(0)
    return "/" + "/".join(parts)


def _derive_label(path: str) -> str:
    """Derive a human-readable label from a URL path.

    ``/``                 -> ``Home``
    ``/about/team``       -> ``Team``
    ``/capabilities/dual-use`` -> ``Dual Use``

    """
    last_segment = path.rstrip("/").rsplit("/", maxsplit=1)[-1]
    if not last_segment:
        return "Home"
    return last_segment.strip("[]").replace("-", " ").replace("_", " ").title()
