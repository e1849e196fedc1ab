"""A small virtual operating system: kernel, heartbeat clock, device registry, logger and task registry."""

__version__ = "1.0.0"