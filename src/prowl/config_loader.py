"""Load ProwlConfig from prowl.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from prowl._errors import ConfigError
from prowl.config import ProwlConfig

CONFIG_FILENAMES = ("prowl.yaml", "prowl.yml", "prowl.toml")

_CONFIG_KEYS = frozenset({
    "manifest", "app_dir", "strip_segments", "root_path", "allowed_terminals",
    "case_sensitive", "depth_high", "depth_medium", "strict_links",
    "min_score", "base_url", "locales", "default_locale",
})


def load_config(root: Path, **overrides: object) -> ProwlConfig:
    """Load ProwlConfig from root, optionally merging prowl.yaml.

    Looks for prowl.yaml, prowl.yml, or prowl.toml in root. If found, loads
    and merges with overrides. Overrides take precedence; overrides that
    are ``None`` are ignored so unset CLI flags never mask file values.

    Raises:
        ConfigError: If the config file cannot be parsed or has unknown keys.

    """
    file_config = read_config_file(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    try:
        return ProwlConfig(root=Path(root), **merged)
    except TypeError as exc:
        msg = f"Invalid configuration: {exc}"
        raise ConfigError(msg) from exc


def find_config_file(root: Path) -> Path | None:
    """Return the first config file present in *root*, or *None*."""
    for name in CONFIG_FILENAMES:
        path = root / name
        if path.is_file():
            return path
    return None


def read_config_file(root: Path) -> dict[str, object]:
    """Read prowl config from yaml/toml if present. Returns empty dict otherwise."""
    path = find_config_file(root)
    if path is None:
        return {}
    if path.suffix == ".toml":
        data = _parse_toml(path)
    else:
        data = _parse_yaml(path)
    return _flatten_prowl_section(data, path)


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path}: expected a mapping at top level"
        raise ConfigError(msg)
    return data


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc


def _flatten_prowl_section(data: dict[str, object], path: Path) -> dict[str, object]:
    """Extract prowl.* keys into top-level config."""
    result: dict[str, object] = {}
    for k, v in data.items():
        if k != "prowl" and k in _CONFIG_KEYS:
            result[k] = v
    section = data.get("prowl")
    if isinstance(section, dict):
        unknown = set(section) - _CONFIG_KEYS
        if unknown:
            msg = f"{path}: unknown prowl settings {', '.join(sorted(unknown))}"
            raise ConfigError(msg)
        result.update(section)
    return result
