"""Route manifest — read raw route records from YAML, TOML or JSON.

A manifest is either a list of records or a mapping with a ``routes`` list::

    routes:
      - path: /
        label: Home
        exits: [/about, /contact]
      - path: /about
        entries: ["/"]
      - path: /404
        entries: ["*"]

Records are returned as plain dicts; the registry validates and normalizes
them.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml

from prowl._errors import ManifestError
from prowl._types import RawRoute

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_manifest(path: Path) -> tuple[RawRoute, ...]:
    """Load raw route records from *path*.

    The format is chosen by suffix: ``.yaml``/``.yml``, ``.toml`` or ``.json``.

    Raises:
        ManifestError: If the file is missing, unparsable, or not shaped as a
            list of route records.

    """
    if not path.is_file():
        msg = f"Route manifest not found: {path}"
        raise ManifestError(msg)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read route manifest {path}: {exc}"
        raise ManifestError(msg) from exc

    data = parse_manifest(text, suffix=path.suffix.lower(), source=str(path))
    return _extract_records(data, path)


def parse_manifest(text: str, *, suffix: str, source: str = "<string>") -> Any:
    """Parse manifest text according to its file *suffix*."""
    try:
        if suffix in _YAML_SUFFIXES:
            return yaml.safe_load(text)
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        msg = f"Cannot parse route manifest {source}: {exc}"
        raise ManifestError(msg) from exc

    msg = f"Unsupported manifest format {suffix!r} for {source} (use .yaml, .toml or .json)"
    raise ManifestError(msg)


def _extract_records(data: Any, path: Path) -> tuple[RawRoute, ...]:
    if isinstance(data, dict):
        data = data.get("routes")
    if data is None:
        return ()
    if not isinstance(data, list):
        msg = f"{path}: 'routes' must be a list of route records"
        raise ManifestError(msg)
    for position, record in enumerate(data):
        if not isinstance(record, dict):
            msg = f"{path}: route #{position} must be a mapping, got {type(record).__name__}"
            raise ManifestError(msg)
    return tuple(data)
