"""Command-line entry point that boots the virtual system."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

from vos.input_monitor import InputMonitor
from vos.kernel import get_kernel
from vos.logger import Logger, MessageType
from vos.scheduler import Scheduler, TaskRegistrationError
from vos.tasks import Priority, Task, TaskState

_POLL_INTERVAL = 0.05


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _try_register(scheduler: Scheduler, task: Task) -> bool:
    try:
        scheduler.register_task(task)
    except TaskRegistrationError:
        return False
    return True


def _demo_task(logger: Logger) -> None:
    logger.log(MessageType.HEADER, "Testing TCB Implementation")
    task = Task(
        "TestLogger",
        Priority.MEDIUM,
        lambda: logger.log(MessageType.INFO, "Hello from test task!"),
    )
    logger.log(MessageType.INFO, f"Task: {task.name} (ID: {task.id})")
    logger.log(MessageType.INFO, "Priority: " + task.priority_string())
    logger.log(MessageType.INFO, "State: " + task.state_string())
    task.set_state(TaskState.RUNNING)
    logger.log(MessageType.INFO, "After RUNNING: " + task.state_string())
    task.execute()
    task.set_state(TaskState.WAITING)
    logger.log(MessageType.INFO, "After WAITING: " + task.state_string())


def _demo_scheduler(logger: Logger) -> Scheduler:
    logger.log(MessageType.HEADER, "Testing Task Registration System")
    scheduler = Scheduler(logger)
    tasks = [
        Task(
            "BackgroundLogger",
            Priority.LOW,
            lambda: logger.log(MessageType.INFO, "Background task executed"),
        ),
        Task(
            "SystemMonitor",
            Priority.HIGH,
            lambda: logger.log(MessageType.INFO, "System monitoring task executed"),
        ),
        Task(
            "DataProcessor",
            Priority.MEDIUM,
            lambda: logger.log(MessageType.INFO, "Data processing task executed"),
        ),
    ]
    results = [_try_register(scheduler, t) for t in tasks]
    logger.log(
        MessageType.INFO,
        "Registration results: " + ", ".join(str(int(r)) for r in results),
    )
    duplicate = Task("BackgroundLogger", Priority.MEDIUM, lambda: None)
    if not _try_register(scheduler, duplicate):
        logger.log(MessageType.INFO, "Duplicate prevention working correctly")

    scheduler.log_registered_tasks()
    scheduler.log_registration_stats()
    scheduler.log_summary()
    logger.log(MessageType.STATUS, f"Total registered tasks: {len(scheduler)}")
    return scheduler


def main(argv: Sequence[str] | None = None) -> int:
    """Boot the system, run the demonstrations and wait for 'exit'."""
    if argv is None:
        argv = sys.argv[1:]
    kernel = get_kernel()
    try:
        kernel.initialize()
    except Exception:
        print("Failed to initialise kernel!", file=sys.stderr)
        return 1

    logger = kernel.logger
    environment = argv[0] if argv else "local"
    logger.log(MessageType.HEADER, "vOS - Virtual Operating system")
    logger.log(MessageType.INFO, f"Running in: {environment} environment")

    _demo_task(logger)
    _demo_scheduler(logger)

    logger.log(MessageType.HEADER, "System Status")
    logger.log(MessageType.STATUS, "Kernel Initialised: " + _yes_no(kernel.is_initialized()))
    logger.log(MessageType.STATUS, "Logger initialized: " + _yes_no(logger.is_initialized()))
    logger.log(MessageType.STATUS, f"Device count: {kernel.device_registry.device_count()}")
    logger.log(MessageType.STATUS, "Clock running: " + _yes_no(kernel.clock.is_running()))
    logger.log(MessageType.STATUS, f"Current tick count: {kernel.ticks()}")
    logger.log(
        MessageType.INFO,
        "Real-time clock running... System will auto-tick every 100ms",
    )
    logger.log(MessageType.INFO, "Type 'exit' to shutdown the system")

    monitor = InputMonitor(logger)
    monitor.start()
    try:
        while not monitor.is_shutdown_requested():
            time.sleep(_POLL_INTERVAL)
    except KeyboardInterrupt:
        pass

    logger.log(MessageType.INFO, f"Final tick count: {kernel.ticks()}")
    logger.log(MessageType.INFO, "Shutting down system...")
    monitor.stop()
    kernel.shutdown()
    logger.log(MessageType.INFO, "System halted.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())