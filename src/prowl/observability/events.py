"""Event model for validation runs.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import TypeAlias


# ---------------------------------------------------------------------------
# Loading events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RoutesLoaded:
    """Raw route records were read from a manifest and/or discovery.

    Attributes:
        source: Manifest path the records came from.
        declared: Records read from the manifest.
        discovered: Extra records added by app-directory discovery.
        load_ms: Time spent loading in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    source: str
    declared: int
    discovered: int
    load_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Analysis events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GraphBuilt:
    """A navigation graph was built from normalized routes.

    Attributes:
        source: Manifest path the routes came from.
        nodes: Node count (wildcard included).
        edges: Distinct directed edge count.
        build_ms: Time spent normalizing and building in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    source: str
    nodes: int
    edges: int
    build_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ValidationCompleted:
    """A validation report was produced.

    Attributes:
        source: Manifest path that was validated.
        routes: Declared route count.
        orphans: Orphan count.
        dead_ends: Disallowed dead-end count.
        cycles: Cycle count.
        health_score: Resulting health score.
        duration_ms: Total time for load, build and analysis.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    source: str
    routes: int
    orphans: int
    dead_ends: int
    cycles: int
    health_score: float
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ValidationFailed:
    """Validation stopped on a fatal error.

    Attributes:
        source: Manifest path that was validated.
        error_type: ``ProwlError.error_type`` of the failure.
        detail: Error message.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    source: str
    error_type: str
    detail: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

ProwlEvent: TypeAlias = RoutesLoaded | GraphBuilt | ValidationCompleted | ValidationFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
