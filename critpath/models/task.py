"""Task and computed schedule data models."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable


@dataclass(frozen=True)
class Task:
    """A unit of schedulable work as entered by the caller."""

    id: int
    name: str
    duration: int
    dependencies: FrozenSet[int] = field(default_factory=frozenset)

    def __post_init__(self):
        """Normalize dependencies to a frozenset of ids."""
        if not isinstance(self.dependencies, frozenset):
            object.__setattr__(self, 'dependencies', frozenset(self.dependencies or ()))

    def with_changes(self, **changes: Any) -> 'Task':
        """Return an edited copy of this task."""
        return replace(self, **changes)

    def depends_on(self, task_id: int) -> bool:
        """Check whether this task lists task_id as a dependency."""
        return task_id in self.dependencies


@dataclass(frozen=True)
class ScheduledTask:
    """A task annotated with the values computed by the calculator."""

    task: Task
    early_start: int
    early_finish: int
    late_start: int
    late_finish: int
    total_float: int
    is_critical: bool

    @property
    def id(self) -> int:
        return self.task.id

    @property
    def name(self) -> str:
        return self.task.name

    @property
    def duration(self) -> int:
        return self.task.duration

    @property
    def dependencies(self) -> FrozenSet[int]:
        return self.task.dependencies

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return {
            'id': self.id,
            'name': self.name,
            'duration': self.duration,
            'dependencies': sorted(self.dependencies),
            'early_start': self.early_start,
            'early_finish': self.early_finish,
            'late_start': self.late_start,
            'late_finish': self.late_finish,
            'float': self.total_float,
            'is_critical': self.is_critical,
        }


@dataclass(frozen=True)
class ScheduleRisk:
    """A risk entry returned by a risk analyzer."""

    risk: str
    impact: str
    mitigation: str

    def to_dict(self) -> Dict[str, str]:
        return {'risk': self.risk, 'impact': self.impact, 'mitigation': self.mitigation}


def tasks_by_id(tasks: Iterable[Task]) -> Dict[int, Task]:
    """Index tasks by id."""
    return {task.id: task for task in tasks}
