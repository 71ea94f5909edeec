"""Sitemap generation — produce sitemap.xml from the reachable routes.

Only routes reachable from the root (or the wildcard) are listed; orphans
are left out since no navigation leads to them. Priority falls with link
depth. With locales configured, every route is listed once per locale
with ``xhtml:link`` alternates for the others.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement, tostring

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

# XML namespaces for sitemaps and language alternates
_SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
_XHTML_NS = "http://www.w3.org/1999/xhtml"


def page_priority(depth: int) -> float:
    """Sitemap priority for a route at *depth* links below the root."""
    return round(max(0.1, 1.0 - 0.1 * depth), 1)


def generate_sitemap(
    depths: Mapping[str, int],
    base_url: str,
    *,
    locales: Sequence[str] = (),
    default_locale: str | None = None,
    lastmod: str | None = None,
) -> str:
    """Generate a sitemap.xml string for routes with a known depth.

    Args:
        depths: Route path -> depth, as returned by ``compute_depths``.
            Dynamic segments (``/blog/[slug]``) are skipped.
        base_url: Site base URL (e.g., ``"https://example.com"``).
        locales: Locale prefixes; each route is emitted once per locale.
        default_locale: Locale for the ``x-default`` alternate (defaults to
            the first locale).
        lastmod: ``YYYY-MM-DD`` date to stamp; defaults to today (UTC).

    Returns:
        Complete XML string suitable for writing to ``sitemap.xml``.

    """
    base = base_url.rstrip("/")
    stamp = lastmod or datetime.now(timezone.utc).strftime("%Y-%m-%d")
    fallback = default_locale or (locales[0] if locales else None)

    urlset = Element("urlset")
    urlset.set("xmlns", _SITEMAP_NS)
    if locales:
        urlset.set("xmlns:xhtml", _XHTML_NS)

    ordered = sorted(depths.items(), key=lambda item: (item[1], item[0]))
    for path, depth in ordered:
        if "[" in path:
            continue
        for locale in locales or (None,):
            url_el = SubElement(urlset, "url")
            SubElement(url_el, "loc").text = base + _localized(path, locale)
            SubElement(url_el, "lastmod").text = stamp
            SubElement(url_el, "changefreq").text = "weekly" if depth == 0 else "monthly"
            SubElement(url_el, "priority").text = f"{page_priority(depth):.1f}"

            for alt in locales:
                _add_alternate(url_el, alt, base + _localized(path, alt))
            if fallback is not None:
                _add_alternate(url_el, "x-default", base + _localized(path, fallback))

    xml_text = tostring(urlset, encoding="unicode", xml_declaration=False)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + xml_text + "\n"


def write_sitemap(
    depths: Mapping[str, int],
    base_url: str,
    output: Path,
    *,
    locales: Sequence[str] = (),
    default_locale: str | None = None,
    lastmod: str | None = None,
) -> int | None:
    """Write sitemap.xml to *output* and return its size in bytes.

    Returns *None* (with a warning on stderr) if ``base_url`` is empty.

    """
    if not base_url:
        print(
            "  Sitemap skipped — set base_url in config to enable",
            file=sys.stderr,
        )
        return None

    data = generate_sitemap(
        depths,
        base_url,
        locales=locales,
        default_locale=default_locale,
        lastmod=lastmod,
    ).encode("utf-8")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)
    return len(data)


def _localized(path: str, locale: str | None) -> str:
    """Prefix *path* with a locale segment; the root keeps no trailing slash."""
    if locale is None:
        return path
    return f"/{locale}" if path == "/" else f"/{locale}{path}"


def _add_alternate(url_el: Element, hreflang: str, href: str) -> None:
    link = SubElement(url_el, "xhtml:link")
    link.set("rel", "alternate")
    link.set("hreflang", hreflang)
    link.set("href", href)
