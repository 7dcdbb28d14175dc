"""
Progress tracking for an upload run.

The completed counter is shared by every upload worker. Increments happen
under a lock and return the new value, so each successful upload reports a
distinct count even when workers finish out of order.
"""

import logging
from dataclasses import dataclass, field
from threading import Lock
from typing import Callable, Optional

from solr_post.core.exceptions import SolrPostError


def _noop(*_args) -> None:
    return None


@dataclass
class ProgressCallbacks:
    """Caller supplied hooks. Every hook defaults to a no-op."""

    on_start: Callable[[int], None] = _noop
    on_next: Callable[[int], None] = _noop
    on_finish: Callable[[], None] = _noop
    on_error: Callable[[str, SolrPostError], None] = _noop

    @classmethod
    def from_optional(
        cls,
        on_start: Optional[Callable[[int], None]] = None,
        on_next: Optional[Callable[[int], None]] = None,
        on_finish: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[str, SolrPostError], None]] = None,
    ) -> "ProgressCallbacks":
        return cls(
            on_start=on_start or _noop,
            on_next=on_next or _noop,
            on_finish=on_finish or _noop,
            on_error=on_error or _noop,
        )


@dataclass
class ProgressState:
    """Counters for one run. Never decremented."""

    total: int = 0
    completed: int = 0
    failed: int = 0
    skipped: int = 0
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def increment_completed(self) -> int:
        with self._lock:
            self.completed += 1
            return self.completed

    def increment_failed(self) -> int:
        with self._lock:
            self.failed += 1
            return self.failed

    def increment_skipped(self) -> int:
        with self._lock:
            self.skipped += 1
            return self.skipped


class ProgressTracker:
    """Pairs the shared ProgressState with the caller's callbacks."""

    def __init__(self, callbacks: Optional[ProgressCallbacks] = None):
        self.callbacks = callbacks or ProgressCallbacks()
        self.state = ProgressState()
        self._started = False
        self._finished = False

    def start(self, total: int) -> None:
        if self._started:
            raise RuntimeError("Progress tracking already started")
        self._started = True
        self.state.total = total
        logging.info(f"Indexing {total} files")
        self.callbacks.on_start(total)

    def record_success(self) -> int:
        completed = self.state.increment_completed()
        self.callbacks.on_next(completed)
        return completed

    def record_failure(self, file_path: str, error: SolrPostError) -> None:
        self.state.increment_failed()
        self.callbacks.on_error(file_path, error)

    def record_skipped(self, file_path: str, error: SolrPostError) -> None:
        self.state.increment_skipped()
        self.callbacks.on_error(file_path, error)

    def finish(self) -> None:
        if self._finished:
            raise RuntimeError("Progress tracking already finished")
        self._finished = True
        logging.info(
            f"Indexing complete: {self.state.completed} succeeded, "
            f"{self.state.failed} failed, {self.state.skipped} skipped"
        )
        self.callbacks.on_finish()
