"""Event log — validation history kept in memory.

A bounded ring buffer of ``ProwlEvent`` objects. Besides generic queries
it answers the questions a watch session asks: what was the last result
for this manifest, and is the score going up or down.

Thread Safety:
    Every method takes a ``threading.Lock``. Several route sets may be
    validated in parallel against one log.

"""

import threading
from collections import Counter, deque
from collections.abc import Iterable
from typing import Any

from prowl.observability.events import ProwlEvent, ValidationCompleted, ValidationFailed


class EventLog:
    """Bounded, queryable store of validation events.

    Once ``max_events`` is reached the oldest event is dropped for each
    new one.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 10_000) -> None:
        self._max_events = max_events
        self._events: deque[ProwlEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: ProwlEvent) -> None:
        with self._lock:
            self._events.append(event)

    def append_many(self, events: Iterable[ProwlEvent]) -> None:
        with self._lock:
            self._events.extend(events)

    def query(
        self,
        *,
        event_type: type | None = None,
        since_ns: int = 0,
        source: str | None = None,
        limit: int = 100,
    ) -> list[ProwlEvent]:
        """Return matching events, newest first.

        Args:
            event_type: Keep only instances of this event class.
            since_ns: Keep only events stamped at or after this time.
            source: Keep only events whose manifest path contains this text.
            limit: Stop after this many matches.

        """
        matches: list[ProwlEvent] = []
        with self._lock:
            for event in reversed(self._events):
                if len(matches) == limit:
                    break
                if _matches(event, event_type, since_ns, source):
                    matches.append(event)
        return matches

    def recent(self, n: int = 20) -> list[ProwlEvent]:
        """The last *n* events, oldest first."""
        with self._lock:
            snapshot = list(self._events)
        return snapshot[-n:]

    def latest(self, source: str) -> ValidationCompleted | ValidationFailed | None:
        """The most recent outcome recorded for *source*, pass or fail."""
        with self._lock:
            for event in reversed(self._events):
                if event.source == source and isinstance(
                    event, (ValidationCompleted, ValidationFailed)
                ):
                    return event
        return None

    def score_history(self, source: str) -> list[float]:
        """Health scores of completed checks of *source*, oldest first."""
        with self._lock:
            return [
                event.health_score
                for event in self._events
                if isinstance(event, ValidationCompleted) and event.source == source
            ]

    def clear(self) -> int:
        """Drop every event; returns how many there were."""
        with self._lock:
            dropped = len(self._events)
            self._events.clear()
        return dropped

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Counts by event class and by manifest."""
        with self._lock:
            snapshot = list(self._events)
        return {
            "total": len(snapshot),
            "max_events": self._max_events,
            "by_type": dict(Counter(type(e).__name__ for e in snapshot)),
            "by_source": dict(Counter(e.source for e in snapshot)),
        }


def _matches(
    event: ProwlEvent,
    event_type: type | None,
    since_ns: int,
    source: str | None,
) -> bool:
    if event_type is not None and not isinstance(event, event_type):
        return False
    if event.timestamp_ns < since_ns:
        return False
    return source is None or source in event.source
