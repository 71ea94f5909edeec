"""Observability — structured events for validation runs.

Every ``prowl.app`` entry point accepts an optional ``EventLog`` and
records what it loaded, built and found.  All events are frozen
dataclasses with nanosecond timestamps.

Quick Start:
    >>> from prowl.observability import EventLog, ValidationCompleted
    >>> log = EventLog()
    >>> # prowl.app.check(root, event_log=log)
    >>> # log.query(event_type=ValidationCompleted)

"""

from prowl.observability.events import (
    GraphBuilt,
    ProwlEvent,
    RoutesLoaded,
    ValidationCompleted,
    ValidationFailed,
    now_ns,
)
from prowl.observability.log import EventLog

__all__ = [
    "EventLog",
    "GraphBuilt",
    "ProwlEvent",
    "RoutesLoaded",
    "ValidationCompleted",
    "ValidationFailed",
    "now_ns",
]
