"""Computed schedule result models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .task import ScheduledTask


@dataclass(frozen=True)
class ScheduleResult:
    """Complete output of a schedule computation.

    Tasks are kept in the caller's input order. ``topological_order`` holds
    the task ids in the order the forward pass visited them.
    """

    tasks: Tuple[ScheduledTask, ...]
    project_duration: int
    topological_order: Tuple[int, ...] = ()
    run_id: str = ''
    computed_at: datetime = field(default_factory=datetime.now)

    @property
    def by_id(self) -> Dict[int, ScheduledTask]:
        return {task.id: task for task in self.tasks}

    def get(self, task_id: int) -> Optional[ScheduledTask]:
        """Return the computed task with the given id, if present."""
        return self.by_id.get(task_id)

    @property
    def critical_path(self) -> List[ScheduledTask]:
        """Critical tasks ordered by early start, then topological position."""
        position = {task_id: index for index, task_id in enumerate(self.topological_order)}
        critical = [task for task in self.tasks if task.is_critical]
        return sorted(critical, key=lambda t: (t.early_start, position.get(t.id, 0)))

    @property
    def critical_path_names(self) -> List[str]:
        return [task.name for task in self.critical_path]

    @property
    def sources(self) -> List[ScheduledTask]:
        """Tasks with no dependencies."""
        return [task for task in self.tasks if not task.dependencies]

    @property
    def sinks(self) -> List[ScheduledTask]:
        """Tasks that no other task depends on."""
        referenced = set()
        for task in self.tasks:
            referenced.update(task.dependencies)
        return [task for task in self.tasks if task.id not in referenced]

    def successors(self, task_id: int) -> List[ScheduledTask]:
        return [task for task in self.tasks if task_id in task.dependencies]

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON export."""
        return {
            'run_id': self.run_id,
            'computed_at': self.computed_at,
            'project_duration': self.project_duration,
            'critical_path': [task.id for task in self.critical_path],
            'tasks': [task.to_dict() for task in self.tasks],
        }

    def to_human_readable(self) -> str:
        """Generate human-readable report."""
        lines = [
            f"=== Schedule Run: {self.run_id} ===",
            f"Computed at: {self.computed_at}",
            f"Project duration: {self.project_duration}",
            "",
            "Tasks:",
            f"  {'ID':>4} {'Name':<28} {'Dur':>4} {'ES':>4} {'EF':>4} {'LS':>4} {'LF':>4} {'Float':>5}  Critical",
        ]

        for task in self.tasks:
            lines.append(
                f"  {task.id:>4} {task.name[:28]:<28} {task.duration:>4} "
                f"{task.early_start:>4} {task.early_finish:>4} "
                f"{task.late_start:>4} {task.late_finish:>4} {task.total_float:>5}  "
                f"{'Yes' if task.is_critical else 'No'}"
            )

        lines.extend([
            "",
            "Critical path:",
            f"  {' -> '.join(self.critical_path_names) if self.critical_path else '(none)'}",
        ])

        lines.append("=" * 50)

        return "\n".join(lines)
