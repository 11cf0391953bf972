"""Scheduling error types."""

from typing import Any, List


class SchedulingError(ValueError):
    """Base class for structural task-set errors. No schedule is produced."""


class CyclicDependencyError(SchedulingError):
    """The dependency graph contains a cycle."""

    def __init__(self, cycle: List[int]):
        self.cycle = list(cycle)
        path = ' -> '.join(str(task_id) for task_id in self.cycle + self.cycle[:1])
        super().__init__(f"Cyclic dependency: {path}")


class DanglingDependencyError(SchedulingError):
    """A task depends on an id that is not in the task set."""

    def __init__(self, task_id: int, dependency_id: int):
        self.task_id = task_id
        self.dependency_id = dependency_id
        super().__init__(
            f"Task {task_id} depends on task {dependency_id}, which does not exist"
        )


class InvalidDurationError(SchedulingError):
    """A task duration is negative or not an integer."""

    def __init__(self, task_id: Any, duration: Any):
        self.task_id = task_id
        self.duration = duration
        super().__init__(
            f"Task {task_id} has invalid duration {duration!r}; expected a non-negative integer"
        )


class InvalidTaskIdError(SchedulingError):
    """A task id is not a positive integer."""

    def __init__(self, task_id: Any):
        self.task_id = task_id
        super().__init__(f"Invalid task id {task_id!r}; expected a positive integer")


class DuplicateTaskIdError(SchedulingError):
    """Two tasks share the same id."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Duplicate task id {task_id}")
