"""Console logger with typed, prefixed messages."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable
from enum import Enum, auto
from typing import TextIO


class MessageType(Enum):
    """Kinds of message the logger knows how to format."""

    BOOT = auto()
    INFO = auto()
    ERROR = auto()
    SHUTDOWN = auto()
    HEARTBEAT = auto()
    PROMPT = auto()
    STATUS = auto()
    HEADER = auto()
    USER_FEEDBACK = auto()


_PREFIXES = {
    MessageType.BOOT: "[BOOT] ",
    MessageType.INFO: "[INFO] ",
    MessageType.ERROR: "[ERROR] ",
    MessageType.SHUTDOWN: "[SHUTDOWN] ",
}


class Logger:
    """Thread-safe logger that writes formatted lines to a text stream.

    Messages are dropped until :meth:`initialize` is called and after
    :meth:`shutdown`.
    """

    def __init__(
        self,
        tick_source: Callable[[], int] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._tick_source = tick_source
        self._stream = stream
        self._lock = threading.Lock()
        self._initialized = False
        self._shutting_down = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def initialize(self) -> None:
        """Enable logging; calling it again has no effect."""
        with self._lock:
            if self._initialized:
                return
            self._shutting_down = False
            self._initialized = True

    def shutdown(self) -> None:
        """Disable logging."""
        with self._lock:
            self._shutting_down = True
            self._initialized = False

    def log(self, message_type: MessageType, message: str) -> None:
        """Write a formatted message, followed by a prompt for PROMPT messages."""
        with self._lock:
            if not self._initialized or self._shutting_down:
                return
            out = self.stream
            out.write(self.format_message(message_type, message) + "\n")
            if message_type is MessageType.PROMPT:
                out.write("> ")
            out.flush()

    def format_message(self, message_type: MessageType, message: str) -> str:
        """Return the text that :meth:`log` writes for this message."""
        if message_type in _PREFIXES:
            return _PREFIXES[message_type] + message
        if message_type is MessageType.HEARTBEAT:
            ticks = self._tick_source() if self._tick_source is not None else 0
            return f"[TICK {ticks}] {message}"
        if message_type is MessageType.HEADER:
            return f"\n=== {message} ==="
        if message_type is MessageType.PROMPT:
            return ""
        return message

    def is_initialized(self) -> bool:
        """True while the logger accepts messages."""
        with self._lock:
            return self._initialized and not self._shutting_down