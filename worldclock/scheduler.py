"""Periodic background task used to drive the clock."""
from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class PeriodicTask:
    """Run ``callback`` every ``interval`` seconds on a daemon thread.

    Deadlines are anchored to the start time so late wake-ups do not
    accumulate. When a run overruns one or more periods the missed runs are
    skipped rather than replayed.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        *,
        name: str = "periodic-task",
        time_func: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._callback = callback
        self._name = name
        self._time_func = time_func
        self._stopped = threading.Event()
        self._lock = threading.RLock()
        self._thread: Optional[threading.Thread] = None
        self.runs = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stopped.is_set()

    def start(self) -> None:
        with self._lock:
            if self._thread is not None:
                raise RuntimeError(f"{self._name} already started")
            self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
            self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> bool:
        """Cancel the task. Returns ``False`` if it was already stopped."""
        with self._lock:
            if self._stopped.is_set():
                return False
            self._stopped.set()
            thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.debug("%s stopped after %d runs", self._name, self.runs)
        return True

    def _run(self) -> None:
        deadline = self._time_func() + self.interval
        while not self._stopped.wait(max(0.0, deadline - self._time_func())):
            with self._lock:
                if self._stopped.is_set():
                    break
                self._fire()
            now = self._time_func()
            deadline += self.interval
            if deadline <= now:
                skipped = int((now - deadline) // self.interval) + 1
                logger.debug("%s skipped %d late runs", self._name, skipped)
                deadline += skipped * self.interval

    def _fire(self) -> None:
        self.runs += 1
        try:
            self._callback()
        except Exception:  # noqa: BLE001 - keep ticking after a failed run
            logger.exception("%s callback failed", self._name)


__all__ = ["PeriodicTask"]
