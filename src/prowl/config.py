"""Prowl configuration.

ProwlConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from prowl._errors import ConfigError


@dataclass(frozen=True, slots=True)
class ProwlConfig:
    """Configuration for a Prowl validation run.

    Attributes:
        root: Project directory (contains the manifest and prowl.yaml).
              Always resolved to an absolute path on construction.
        manifest: Route manifest file, relative to ``root``.
        app_dir: Optional Next.js-style ``app/`` directory to discover
            pages from, relative to ``root``.
        strip_segments: Leading dynamic segments dropped from discovered
            paths (e.g. ``[locale]``).
        root_path: URL path of the application root.
        allowed_terminals: Paths that may legitimately have no exits
            (logout, error pages, thank-you pages).
        case_sensitive: Keep letter case when normalizing paths.
        depth_high: Depth at or beyond which a route is flagged ``HIGH``.
        depth_medium: Depth at or beyond which a route is flagged ``MEDIUM``.
        strict_links: Warn about links declared by only one endpoint.
        min_score: Health score below which ``prowl check`` fails.
        base_url: Base URL for sitemap generation.
        locales: Locale prefixes for sitemap alternates.
        default_locale: Locale used for the ``x-default`` alternate.

    """

    root: Path = field(default_factory=Path.cwd)
    manifest: str = "routes.yaml"
    app_dir: str | None = None
    strip_segments: tuple[str, ...] = ("[locale]",)
    root_path: str = "/"
    allowed_terminals: frozenset[str] = frozenset()
    case_sensitive: bool = False
    depth_high: int = 5
    depth_medium: int = 4
    strict_links: bool = False
    min_score: float = 0.0
    base_url: str = ""
    locales: tuple[str, ...] = ()
    default_locale: str | None = None

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        # Accept lists from YAML/TOML and CLI flags; a lone string is one item
        object.__setattr__(
            self, "allowed_terminals", frozenset(_items(self.allowed_terminals)),
        )
        object.__setattr__(self, "strip_segments", _items(self.strip_segments))
        object.__setattr__(self, "locales", _items(self.locales))

        if not self.root_path.startswith("/"):
            msg = f"root_path must start with '/', got {self.root_path!r}"
            raise ConfigError(msg)
        if not 1 <= self.depth_medium <= self.depth_high:
            msg = (
                f"depth thresholds must satisfy 1 <= depth_medium <= depth_high, "
                f"got medium={self.depth_medium} high={self.depth_high}"
            )
            raise ConfigError(msg)
        if not 0.0 <= self.min_score <= 10.0:
            msg = f"min_score must be between 0 and 10, got {self.min_score}"
            raise ConfigError(msg)
        if self.default_locale is not None and self.default_locale not in self.locales:
            msg = f"default_locale {self.default_locale!r} is not one of locales"
            raise ConfigError(msg)

    @property
    def manifest_path(self) -> Path:
        """Absolute path to the route manifest."""
        return self.root / self.manifest

    @property
    def app_path(self) -> Path | None:
        """Absolute path to the app directory, or *None* if discovery is off."""
        if self.app_dir is None:
            return None
        return self.root / self.app_dir


def _items(value: object) -> tuple[str, ...]:
    """Coerce a config value to a tuple of strings.

    ``"/logout"`` becomes ``("/logout",)`` rather than its characters.
    """
    if isinstance(value, str):
        return (value,)
    try:
        return tuple(value)  # type: ignore[call-overload]
    except TypeError:
        msg = f"expected a string or a list of strings, got {value!r}"
        raise ConfigError(msg) from None
