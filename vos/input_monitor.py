"""Background reader of console commands."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from vos.logger import Logger, MessageType


class InputMonitor:
    """Reads commands line by line and records a request to shut down.

    The command ``exit`` requests shutdown, as does the end of input.
    """

    def __init__(self, logger: Logger, input_stream: TextIO | None = None) -> None:
        self._logger = logger
        self._input = input_stream
        self._shutdown_requested = threading.Event()
        self._monitoring = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Begin reading commands on a background thread."""
        if self._monitoring.is_set():
            return
        self._monitoring.set()
        self._thread = threading.Thread(
            target=self._loop, name="vos-input", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop monitoring and wait for the reader thread to finish."""
        if not self._monitoring.is_set():
            return
        self._monitoring.clear()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def is_shutdown_requested(self) -> bool:
        return self._shutdown_requested.is_set()

    def handle_command(self, command: str) -> bool:
        """Act on one command line; return True when it asks to shut down."""
        command = command.rstrip("\r\n")
        if command == "exit":
            self._shutdown_requested.set()
            return True
        if command:
            self._logger.log(
                MessageType.USER_FEEDBACK,
                f"Unknown command '{command}'. Type 'exit' to shutdown",
            )
        return False

    def _loop(self) -> None:
        stream = self._input if self._input is not None else sys.stdin
        while self._monitoring.is_set():
            self._logger.log(MessageType.PROMPT, "")
            line = stream.readline()
            if not line:
                self._shutdown_requested.set()
                break
            if self.handle_command(line):
                break