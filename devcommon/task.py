"""Run callables in background threads and wait for all of them."""

from __future__ import annotations

import threading
from typing import Callable, Optional


class Task:
    """A group of callables run concurrently; the first failure is kept."""

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()
        self.error: Optional[Exception] = None

    def go(self, fn: Callable[[], object]) -> "Task":
        """Start ``fn`` in a new thread unless a previous one has already failed."""
        if self.error is not None:
            return self
        thread = threading.Thread(target=self._run, args=(fn,), daemon=True)
        self._threads.append(thread)
        thread.start()
        return self

    def _run(self, fn: Callable[[], object]) -> None:
        try:
            fn()
        except Exception as exc:
            with self._lock:
                if self.error is None:
                    self.error = exc

    def wait(self) -> None:
        """Block until every started callable finishes; re-raise the first failure."""
        for thread in self._threads:
            thread.join()
        if self.error is not None:
            raise self.error