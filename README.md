# vos

A tiny virtual operating system that runs in your terminal. On boot it starts
a kernel. The kernel sets up a logger, a device registry that holds four
default devices, and a heartbeat clock that ticks every 100 ms. It then
demonstrates a task and a task registry. The registry registers tasks and
summarises them by priority and state.

## Installing

```
pip install .
```

## Running

```
vos
```

You can also name the environment. The name appears in the banner and
defaults to `local`:

```
vos docker
```

Once the system is up, it prints a `[TICK n] System Heartbeat` line on every
clock tick and waits for commands at a `> ` prompt. Type `exit` to shut the
system down. End of input and Ctrl-C also shut it down. Any other non-empty
command gets an "Unknown command" reply.

## Using it as a library

```python
from vos.kernel import Kernel
from vos.scheduler import Scheduler
from vos.tasks import Priority, Task, TaskState

with Kernel() as kernel:  # initialize() on entry, shutdown() on exit
    task = Task("DataProcessor", Priority.MEDIUM, lambda: print("working"))
    task.set_state(TaskState.RUNNING)
    task.execute()          # True when the callback completed

    scheduler = Scheduler(kernel.logger)
    scheduler.register_task(task)
    scheduler.log_summary()
    print(len(scheduler), scheduler.count_by_priority(Priority.MEDIUM))
```

`vos.kernel.get_kernel()` returns a single kernel that is shared by the whole
process. The `vos` command uses that kernel. `Scheduler()` with no logger also
uses that kernel's logger.

Tasks move between states as follows:

- `READY` to `RUNNING`
- `RUNNING` to `WAITING`, or back to `READY`
- `WAITING` to `READY`

Any other change raises `ValueError`. A task runs its callback only while it
is `RUNNING`.

`Scheduler.register_task` raises `TaskRegistrationError` in two cases: when the
task has no name or no callback, and when a task of the same name is already
registered. `Scheduler.unregister_task` removes the named task and returns it.
It raises `KeyError` for an unknown name.

The modules are:

- `vos.logger`: `MessageType` and the `Logger`. The logger writes prefixed lines
  such as `[INFO] ...` or `[BOOT] ...` to a stream, which is stdout by default.
- `vos.devices`: `Device` and `DeviceRegistry`.
- `vos.tasks`: `Task`, `Priority`, `TaskState` and `generate_task_id`.
- `vos.clock`: `Clock`. It calls a function every interval on a background
  thread.
- `vos.kernel`: `Kernel` and `get_kernel`.
- `vos.input_monitor`: `InputMonitor`. It reads console commands on a
  background thread.
- `vos.scheduler`: `Scheduler` and `TaskRegistrationError`.
- `vos.main`: `main`, the entry point of the `vos` command.

## What it does not do

The scheduler is a registry only. It stores tasks, counts them and reports on
them. It does not run tasks or switch between them on clock ticks. A task's
callback runs only when you call `Task.execute()`. `exit` is the only command
the console understands.

## Tests

```
pip install ".[test]"
pytest
```