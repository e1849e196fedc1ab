"""Registry of tasks, keyed by unique name."""

from __future__ import annotations

import threading
from collections.abc import Iterator

from vos.logger import Logger, MessageType
from vos.tasks import Priority, Task, TaskState

_SUMMARY_ORDER = (Priority.HIGH, Priority.MEDIUM, Priority.LOW)


class TaskRegistrationError(ValueError):
    """Raised when a task is invalid or its name is already registered."""


class Scheduler:
    """Thread-safe registry of tasks that reports on them through a logger."""

    def __init__(self, logger: Logger | None = None) -> None:
        if logger is None:
            from vos.kernel import get_kernel

            logger = get_kernel().logger
        self._logger = logger
        self._tasks: dict[str, Task] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        with self._lock:
            return iter(list(self._tasks.values()))

    @staticmethod
    def _is_valid(task: Task | None) -> bool:
        return task is not None and bool(task.name) and task.has_callback()

    def register_task(self, task: Task) -> None:
        """Add a task; raise TaskRegistrationError if invalid or a duplicate."""
        with self._lock:
            if not self._is_valid(task):
                self._logger.log(MessageType.ERROR, "Task validation failed")
                raise TaskRegistrationError("task validation failed")
            if task.name in self._tasks:
                self._logger.log(
                    MessageType.ERROR, "Task name is duplicate for :" + task.name
                )
                raise TaskRegistrationError(f"duplicate task name: {task.name}")
            self._tasks[task.name] = task
            self._logger.log(
                MessageType.INFO, "Task registered successfully: " + task.name
            )

    def is_task_registered(self, name: str) -> bool:
        return name in self

    def find_task(self, name: str) -> Task | None:
        """Return the task with this name, or None."""
        with self._lock:
            return self._tasks.get(name)

    def unregister_task(self, name: str) -> Task:
        """Remove and return the named task; raise KeyError if it is unknown."""
        with self._lock:
            task = self._tasks.pop(name, None)
            if task is None:
                self._logger.log(
                    MessageType.ERROR, "Task not found for unregistration: " + name
                )
                raise KeyError(name)
            self._logger.log(MessageType.INFO, "Task unregistered: " + name)
            return task

    def has_task_with_priority(self, priority: Priority) -> bool:
        with self._lock:
            return any(t.priority == priority for t in self._tasks.values())

    def task_names_by_state(self, state: TaskState) -> list[str]:
        with self._lock:
            return [name for name, t in self._tasks.items() if t.state is state]

    def count_by_state(self, state: TaskState) -> int:
        with self._lock:
            return sum(1 for t in self._tasks.values() if t.state is state)

    def count_by_priority(self, priority: Priority) -> int:
        with self._lock:
            return sum(1 for t in self._tasks.values() if t.priority == priority)

    def log_registered_tasks(self) -> None:
        """Log one line per registered task."""
        with self._lock:
            if not self._tasks:
                self._logger.log(MessageType.INFO, "no task registered")
                return
            self._logger.log(MessageType.HEADER, "Registered Tasks")
            for name, task in self._tasks.items():
                self._logger.log(
                    MessageType.INFO,
                    f"Task: {name} (ID: {task.id}, "
                    f"Priority: {task.priority_string()}, "
                    f"State: {task.state_string()})",
                )

    def log_registration_stats(self) -> None:
        """Log task counts by state and by priority."""
        with self._lock:
            lines = [
                f"Total Tasks: {len(self._tasks)}",
                "State Distribution:",
                *(
                    f"  - {state.name}: {self.count_by_state(state)}"
                    for state in (TaskState.READY, TaskState.RUNNING, TaskState.WAITING)
                ),
                "Priority Distribution:",
                *(
                    f"  - {priority.name}: {self.count_by_priority(priority)}"
                    for priority in (Priority.LOW, Priority.MEDIUM, Priority.HIGH)
                ),
            ]
            self._logger.log(MessageType.HEADER, "Task Registration Statistics")
            for line in lines:
                self._logger.log(MessageType.STATUS, line)

    def log_summary(self) -> None:
        """Log tasks grouped by priority, highest first."""
        with self._lock:
            if not self._tasks:
                self._logger.log(MessageType.INFO, "No tasks to summarize")
                return
            self._logger.log(MessageType.HEADER, "Task Summary")
            for priority in _SUMMARY_ORDER:
                self._logger.log(MessageType.INFO, f"{priority.name} Priority Tasks:")
                matching = [
                    (name, t) for name, t in self._tasks.items() if t.priority == priority
                ]
                if not matching:
                    self._logger.log(MessageType.INFO, "  (none)")
                for name, task in matching:
                    self._logger.log(
                        MessageType.INFO, f"  - {name} ({task.state_string()})"
                    )