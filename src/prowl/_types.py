"""Shared type definitions for prowl."""

from collections.abc import Mapping, Sequence
from typing import Any, Literal, TypeAlias

# Canonical route URL path (e.g., "/", "/about/team")
RoutePath: TypeAlias = str

# One raw route record as produced by a manifest or discovery
RawRoute: TypeAlias = Mapping[str, Any]

# Sequence of raw records handed to the registry
RawRoutes: TypeAlias = Sequence[RawRoute]

# Severity attached to a depth warning or finding
Severity: TypeAlias = Literal["HIGH", "MEDIUM", "LOW", "INFO"]

# Sentinel entry point meaning "reachable from outside the declared graph"
WILDCARD: RoutePath = "*"
