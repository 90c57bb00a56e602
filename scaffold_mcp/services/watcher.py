"""Directory watcher.

Polls a source tree for added/changed/deleted modules and generates stub
tests for added and changed ones. Files present when watching starts do
not produce events.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..constants import DEFAULT_SOURCE_ROOT, EXCLUDED_DIRS, WATCH_POLL_INTERVAL_SECONDS
from ..core.paths import is_candidate_module
from ..core.scaffolder import Scaffolder

logger = logging.getLogger(__name__)


class WatchEventKind(str, Enum):
    ADDED = "added"
    CHANGED = "changed"
    DELETED = "deleted"


@dataclass(frozen=True)
class WatchEvent:
    """A single observed file-system change."""
    kind: WatchEventKind
    path: str


class ModuleWatcher:
    """Mtime-snapshot polling watcher that feeds the scaffolder."""

    def __init__(
        self,
        watch_path: str | Path = DEFAULT_SOURCE_ROOT,
        scaffolder: Scaffolder | None = None,
        poll_interval: float = WATCH_POLL_INTERVAL_SECONDS,
    ):
        self._watch_path = Path(watch_path)
        self._scaffolder = scaffolder or Scaffolder(source_root=watch_path)
        self._poll_interval = poll_interval
        self._snapshot: dict[str, int] | None = None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Take the initial snapshot."""
        self._snapshot = self._scan()
        logger.info(f"Watching {self._watch_path} ({len(self._snapshot)} modules)")

    def stop(self) -> None:
        """Stop the polling loop after the current iteration."""
        if self._running:
            logger.info("File watcher stopped")
        self._running = False

    def poll_once(self) -> list[WatchEvent]:
        """Compare the tree against the last snapshot and return the differences."""
        if self._snapshot is None:
            self.start()
            return []

        current = self._scan()
        events = []

        for path, mtime in current.items():
            previous = self._snapshot.get(path)
            if previous is None:
                events.append(WatchEvent(WatchEventKind.ADDED, path))
            elif previous != mtime:
                events.append(WatchEvent(WatchEventKind.CHANGED, path))

        for path in self._snapshot.keys() - current.keys():
            events.append(WatchEvent(WatchEventKind.DELETED, path))

        self._snapshot = current
        return sorted(events, key=lambda e: e.path)

    def handle_event(self, event: WatchEvent) -> str | None:
        """Generate a test for added/changed modules; deletions are only logged."""
        if event.kind is WatchEventKind.DELETED:
            logger.info(f"File deleted: {event.path}")
            return None

        logger.info(f"File {event.kind.value}: {event.path}")
        try:
            return self._scaffolder.generate_test_file(event.path)
        except Exception as e:
            logger.error(f"Error generating test for {event.path}: {e}")
            return None

    async def run(self) -> None:
        """Poll until stop() is called."""
        self.start()
        self._running = True

        while self._running:
            await asyncio.sleep(self._poll_interval)
            for event in self.poll_once():
                self.handle_event(event)

    def _scan(self) -> dict[str, int]:
        """Map every candidate module under the watch path to its mtime (ns)."""
        snapshot: dict[str, int] = {}

        for dirpath, dirnames, filenames in os.walk(self._watch_path):
            dirnames[:] = [d for d in dirnames if d not in EXCLUDED_DIRS]
            for filename in filenames:
                path = Path(dirpath) / filename
                if not is_candidate_module(path, self._watch_path):
                    continue
                try:
                    snapshot[str(path)] = path.stat().st_mtime_ns
                except FileNotFoundError:
                    # Removed between listing and stat
                    continue

        return snapshot
