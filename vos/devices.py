"""Registry of virtual devices known to the kernel."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

_DEFAULT_DEVICES = (
    ("SystemTimer", "Timer"),
    ("Console", "IO"),
    ("Logger", "System"),
    ("MemoryManager", "System"),
)


@dataclass
class Device:
    """A named device of some type."""

    name: str
    device_type: str
    active: bool = True


class DeviceRegistry:
    """Thread-safe list of devices, seeded with the system defaults."""

    def __init__(self) -> None:
        self._devices: list[Device] = []
        self._lock = threading.Lock()
        self._initialized = False

    def initialize(self) -> None:
        """Register the default devices once."""
        with self._lock:
            if self._initialized:
                return
            self._devices.extend(Device(name, kind) for name, kind in _DEFAULT_DEVICES)
            self._initialized = True

    def cleanup(self) -> None:
        """Deactivate and drop every device."""
        with self._lock:
            for device in self._devices:
                device.active = False
            self._devices.clear()
            self._initialized = False

    def register_device(self, name: str, device_type: str) -> None:
        with self._lock:
            self._devices.append(Device(name, device_type))

    def unregister_device(self, name: str) -> None:
        """Remove every device with this name."""
        with self._lock:
            self._devices = [d for d in self._devices if d.name != name]

    def device_count(self) -> int:
        with self._lock:
            return len(self._devices)

    def devices(self) -> list[Device]:
        """Return copies of the registered devices."""
        with self._lock:
            return [replace(d) for d in self._devices]