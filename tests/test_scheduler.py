import io

import pytest

from vos.logger import Logger
from vos.scheduler import Scheduler, TaskRegistrationError
from vos.tasks import Priority, Task, TaskState


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def scheduler(stream):
    logger = Logger(stream=stream)
    logger.initialize()
    return Scheduler(logger)


def _task(name, priority=Priority.MEDIUM):
    return Task(name, priority, lambda: None)


def test_register_and_find(scheduler, stream):
    task = _task("Alpha")
    scheduler.register_task(task)
    assert scheduler.find_task("Alpha") is task
    assert scheduler.is_task_registered("Alpha")
    assert len(scheduler) == 1
    assert "[INFO] Task registered successfully: Alpha" in stream.getvalue()


def test_find_missing_returns_none(scheduler):
    assert scheduler.find_task("Nope") is None
    assert not scheduler.is_task_registered("Nope")


def test_duplicate_rejected(scheduler, stream):
    scheduler.register_task(_task("Alpha"))
    with pytest.raises(TaskRegistrationError):
        scheduler.register_task(_task("Alpha", Priority.HIGH))
    assert len(scheduler) == 1
    assert scheduler.find_task("Alpha").priority == Priority.MEDIUM
    assert "[ERROR] Task name is duplicate for :Alpha" in stream.getvalue()


@pytest.mark.parametrize(
    "task",
    [None, Task("", Priority.LOW, lambda: None), Task("NoCallback", Priority.LOW, None)],
)
def test_invalid_tasks_rejected(scheduler, stream, task):
    with pytest.raises(TaskRegistrationError):
        scheduler.register_task(task)
    assert len(scheduler) == 0
    assert "[ERROR] Task validation failed" in stream.getvalue()


def test_unregister(scheduler, stream):
    task = _task("Alpha")
    scheduler.register_task(task)
    assert scheduler.unregister_task("Alpha") is task
    assert len(scheduler) == 0
    assert "[INFO] Task unregistered: Alpha" in stream.getvalue()


def test_unregister_missing_raises(scheduler, stream):
    with pytest.raises(KeyError):
        scheduler.unregister_task("Ghost")
    assert "[ERROR] Task not found for unregistration: Ghost" in stream.getvalue()


def test_counts_and_queries(scheduler):
    a = _task("A", Priority.LOW)
    b = _task("B", Priority.HIGH)
    c = _task("C", Priority.HIGH)
    for t in (a, b, c):
        scheduler.register_task(t)
    b.set_state(TaskState.RUNNING)
    assert scheduler.count_by_priority(Priority.HIGH) == 2
    assert scheduler.count_by_priority(Priority.MEDIUM) == 0
    assert scheduler.has_task_with_priority(Priority.LOW)
    assert not scheduler.has_task_with_priority(Priority.MEDIUM)
    assert scheduler.count_by_state(TaskState.RUNNING) == 1
    assert sorted(scheduler.task_names_by_state(TaskState.READY)) == ["A", "C"]
    assert scheduler.task_names_by_state(TaskState.WAITING) == []
    total = sum(scheduler.count_by_state(s) for s in TaskState)
    assert total == len(scheduler)


def test_log_registered_tasks_empty(scheduler, stream):
    scheduler.log_registered_tasks()
    assert len(scheduler) == 0
    assert stream.getvalue() == "[INFO] no task registered\n"


def test_log_registered_tasks_lists_each(scheduler, stream):
    task = _task("Alpha", Priority.LOW)
    scheduler.register_task(task)
    scheduler.log_registered_tasks()
    out = stream.getvalue()
    assert "\n=== Registered Tasks ===" in out
    assert f"[INFO] Task: Alpha (ID: {task.id}, Priority: LOW, State: READY)" in out


def test_log_registration_stats(scheduler, stream):
    scheduler.register_task(_task("A", Priority.HIGH))
    scheduler.log_registration_stats()
    assert scheduler.count_by_priority(Priority.HIGH) == 1
    assert scheduler.count_by_state(TaskState.READY) == 1
    lines = stream.getvalue().splitlines()
    assert "=== Task Registration Statistics ===" in lines
    assert "Total Tasks: 1" in lines
    assert "  - READY: 1" in lines
    assert "  - RUNNING: 0" in lines
    assert "  - HIGH: 1" in lines
    assert "  - LOW: 0" in lines


def test_log_summary_empty(scheduler, stream):
    scheduler.log_summary()
    assert len(scheduler) == 0
    assert stream.getvalue() == "[INFO] No tasks to summarize\n"


def test_log_summary_groups_by_priority(scheduler, stream):
    scheduler.register_task(_task("Mon", Priority.HIGH))
    scheduler.log_summary()
    assert scheduler.find_task("Mon").state_string() == "READY"
    lines = stream.getvalue().splitlines()
    high = lines.index("[INFO] HIGH Priority Tasks:")
    medium = lines.index("[INFO] MEDIUM Priority Tasks:")
    low = lines.index("[INFO] LOW Priority Tasks:")
    assert high < medium < low
    assert lines[high + 1] == "[INFO]   - Mon (READY)"
    assert lines[medium + 1] == "[INFO]   (none)"
    assert lines[low + 1] == "[INFO]   (none)"