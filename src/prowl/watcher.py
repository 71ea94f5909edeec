"""Manifest watcher — notices edits that can change a validation result.

Three kinds of file feed a check, and only those are reported:

- ``config``: prowl.yaml / prowl.yml / prowl.toml at the project root
- ``manifest``: the route manifest named by the config
- ``app``: anything under ``app_dir`` when page discovery is on

Everything else in the project (build output, editor swap files) is
filtered out inside watchfiles before it reaches Python.
"""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from watchfiles import Change

from prowl.config_loader import CONFIG_FILENAMES

if TYPE_CHECKING:
    from collections.abc import Iterator

    from prowl.config import ProwlConfig

ChangeKind: TypeAlias = Literal["created", "modified", "deleted"]
ChangeCategory: TypeAlias = Literal["config", "manifest", "app"]

_KINDS: dict[Change, ChangeKind] = {
    Change.added: "created",
    Change.modified: "modified",
    Change.deleted: "deleted",
}


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """One relevant file change.

    Attributes:
        path: Absolute path to the changed file.
        kind: Created, modified or deleted.
        category: Which input of the check the file belongs to.

    """

    path: Path
    kind: ChangeKind
    category: ChangeCategory


def categorize_change(path: Path, config: ProwlConfig) -> ChangeCategory | None:
    """Say which validation input *path* belongs to, or *None* if none."""
    if path == config.manifest_path:
        return "manifest"
    if path.parent == config.root and path.name in CONFIG_FILENAMES:
        return "config"

    app_path = config.app_path
    if app_path is not None and app_path in path.parents:
        return "app"
    return None


class ManifestWatcher:
    """Watch a project and hand over batches of relevant changes.

    watchfiles blocks, so it runs on a daemon thread. Each debounced
    watchfiles batch becomes one list on a queue, and :meth:`changes`
    drains that queue on the caller's thread so validation never runs
    concurrently with itself.

    """

    def __init__(self, config: ProwlConfig) -> None:
        self._config = config
        self._batches: queue.Queue[list[ChangeEvent]] = queue.Queue()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """True while the background thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Begin watching; a second call while running does nothing."""
        if self.is_running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run,
            name="prowl-watcher",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Ask watchfiles to return and wait briefly for the thread."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=5.0)
            self._thread = None

    def changes(self, poll: float = 0.5) -> Iterator[list[ChangeEvent]]:
        """Yield one batch per save until the watcher stops.

        Batches that piled up while the caller was busy are merged, so a
        slow check is followed by a single re-check rather than several.

        """
        while self.is_running or not self._batches.empty():
            try:
                batch = self._batches.get(timeout=poll)
            except queue.Empty:
                continue
            while not self._batches.empty():
                batch = batch + self._batches.get_nowait()
            yield batch

    def _accepts(self, change: Change, path: str) -> bool:
        return categorize_change(Path(path), self._config) is not None

    def _run(self) -> None:
        from watchfiles import watch

        for raw in watch(
            self._config.root,
            watch_filter=self._accepts,
            stop_event=self._stop,
            debounce=300,
            step=100,
        ):
            # The last change to a path within one debounce window wins
            latest: dict[Path, Change] = {}
            for change, path_str in raw:
                latest[Path(path_str)] = change
            batch: list[ChangeEvent] = []
            for path, change in sorted(latest.items()):
                category = categorize_change(path, self._config)
                if category is not None:
                    kind = _KINDS.get(change, "modified")
                    batch.append(ChangeEvent(path=path, kind=kind, category=category))
            if batch:
                self._batches.put(batch)
