"""The kernel: owns the logger, device registry and system clock."""

from __future__ import annotations

import threading
from typing import TextIO

from vos.clock import DEFAULT_TICK_INTERVAL, Clock
from vos.devices import DeviceRegistry
from vos.logger import Logger, MessageType


class Kernel:
    """Boots and shuts down the virtual system's core services."""

    NAME = "vOS Kernel"
    VERSION = "1.0"

    def __init__(
        self,
        stream: TextIO | None = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        self._ticks = 0
        self._tick_lock = threading.Lock()
        self.logger = Logger(tick_source=self.ticks, stream=stream)
        self.device_registry = DeviceRegistry()
        self.clock = Clock(self._on_tick, tick_interval)
        self._initialized = False

    def __enter__(self) -> Kernel:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def initialize(self) -> None:
        """Bring up logger, devices and clock; a no-op if already up."""
        if self._initialized:
            return
        self.logger.initialize()
        self.logger.log(
            MessageType.BOOT, f"{self.NAME} v{self.VERSION} - Initialising..."
        )
        self.device_registry.initialize()
        self.logger.log(MessageType.BOOT, "Device registry initialized")
        self.clock.start()
        self.logger.log(MessageType.BOOT, "System clock initialized")
        self._initialized = True
        self.logger.log(MessageType.BOOT, "vOS ready!")

    def shutdown(self) -> None:
        """Stop the clock, drop devices and close the logger."""
        if not self._initialized:
            return
        self.logger.log(MessageType.SHUTDOWN, "Stopping system ticks...")
        self.clock.stop()
        self.logger.log(MessageType.SHUTDOWN, "cleaning up devices...")
        self.device_registry.cleanup()
        self.logger.log(MessageType.SHUTDOWN, "cleaning up logger...")
        self._initialized = False
        self.logger.log(MessageType.SHUTDOWN, "vOS shutdown complete")
        self.logger.shutdown()

    def is_initialized(self) -> bool:
        return self._initialized

    def ticks(self) -> int:
        with self._tick_lock:
            return self._ticks

    def increment_ticks(self) -> None:
        with self._tick_lock:
            self._ticks += 1

    def _on_tick(self) -> None:
        self.increment_ticks()
        if self.clock.is_running():
            self.logger.log(MessageType.HEARTBEAT, "System Heartbeat")


_instance: Kernel | None = None
_instance_lock = threading.Lock()


def get_kernel() -> Kernel:
    """Return the process-wide kernel, creating it on first use."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Kernel()
        return _instance