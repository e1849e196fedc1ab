"""Periodic system clock running on a background thread."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

DEFAULT_TICK_INTERVAL = 0.1


class Clock:
    """Calls ``on_tick`` every ``interval`` seconds while running."""

    def __init__(
        self,
        on_tick: Callable[[], None] | None = None,
        interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        if interval <= 0:
            raise ValueError("tick interval must be positive")
        self._on_tick = on_tick
        self.interval = interval
        self._running = threading.Event()
        self._wake = threading.Event()
        self._thread: threading.Thread | None = None
        self._initialized = False

    def start(self) -> None:
        """Start ticking; calling it again while started has no effect."""
        if self._initialized:
            return
        self._wake.clear()
        self._running.set()
        self._thread = threading.Thread(
            target=self._loop, name="vos-clock", daemon=True
        )
        self._thread.start()
        self._initialized = True

    def stop(self) -> None:
        """Stop ticking and wait for the clock thread to finish."""
        if self._running.is_set():
            self._running.clear()
            self._wake.set()
            thread = self._thread
            if thread is not None and thread is not threading.current_thread():
                thread.join()
            self._thread = None
        self._initialized = False

    def is_running(self) -> bool:
        return self._running.is_set()

    def tick(self) -> None:
        """Deliver one tick, only while the clock is running."""
        if not self._running.is_set():
            return
        if self._on_tick is not None:
            self._on_tick()

    def _loop(self) -> None:
        next_tick = time.monotonic() + self.interval
        while self._running.is_set():
            delay = next_tick - time.monotonic()
            if delay > 0:
                self._wake.wait(delay)
            if self._running.is_set():
                self.tick()
                next_tick += self.interval