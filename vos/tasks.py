"""Task control blocks, priorities and states."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from enum import Enum, IntEnum, auto


class Priority(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2


class TaskState(Enum):
    READY = auto()
    RUNNING = auto()
    WAITING = auto()


_TRANSITIONS = {
    TaskState.READY: frozenset({TaskState.RUNNING}),
    TaskState.RUNNING: frozenset({TaskState.WAITING, TaskState.READY}),
    TaskState.WAITING: frozenset({TaskState.READY}),
}

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def generate_task_id() -> int:
    """Return the next task id, starting from 1."""
    with _id_lock:
        return next(_id_counter)


class Task:
    """A schedulable unit of work with a priority and a state."""

    def __init__(
        self,
        name: str,
        priority: Priority,
        callback: Callable[[], None] | None,
    ) -> None:
        self.id = generate_task_id()
        self.name = name
        self.priority = priority
        self.callback = callback
        self._state = TaskState.READY
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"Task(id={self.id}, name={self.name!r}, "
            f"priority={self.priority.name}, state={self._state.name})"
        )

    @property
    def state(self) -> TaskState:
        return self._state

    def set_state(self, new_state: TaskState) -> None:
        """Move to a new state; raise ValueError if the transition is not allowed."""
        with self._lock:
            if new_state not in _TRANSITIONS.get(self._state, frozenset()):
                raise ValueError(
                    f"invalid transition {self._state.name} -> {new_state.name}"
                )
            self._state = new_state

    def has_callback(self) -> bool:
        return self.callback is not None

    def execute(self) -> bool:
        """Run the callback if the task is RUNNING; True when it completed."""
        if self._state is not TaskState.RUNNING or self.callback is None:
            return False
        try:
            self.callback()
        except Exception:
            return False
        return True

    def state_string(self) -> str:
        return self._state.name

    def priority_string(self) -> str:
        return self.priority.name