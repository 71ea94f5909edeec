"""Export — sitemap generation from the navigation graph."""

from prowl.export.sitemap import generate_sitemap, page_priority, write_sitemap

__all__ = ["generate_sitemap", "page_priority", "write_sitemap"]
