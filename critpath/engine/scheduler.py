"""Critical Path Method schedule calculator."""

import logging
import uuid
from collections import deque
from datetime import datetime
from typing import Dict, List, Sequence

from ..models.result import ScheduleResult
from ..models.task import ScheduledTask, Task, tasks_by_id
from .errors import (
    CyclicDependencyError,
    DanglingDependencyError,
    DuplicateTaskIdError,
    InvalidDurationError,
    InvalidTaskIdError,
)

logger = logging.getLogger(__name__)


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ScheduleCalculator:
    """Computes early/late times, float and the critical path of a task set.

    The calculator is stateless: each call to ``compute`` works on its own
    tables built from the input snapshot, so one instance can be shared.
    """

    def compute(self, tasks: Sequence[Task]) -> ScheduleResult:
        """Compute the schedule for tasks.

        Raises a SchedulingError subclass when the task set is not a valid
        acyclic network; no partial result is produced in that case.
        """
        run_id = str(uuid.uuid4())[:8]
        tasks = list(tasks)

        if not tasks:
            logger.warning("No tasks to schedule")
            return ScheduleResult(tasks=(), project_duration=0, run_id=run_id)

        self._validate(tasks)
        successors = self._build_successors(tasks)
        order = self._topological_order(tasks, successors)
        logger.debug(f"Topological order: {order}")

        task_map = tasks_by_id(tasks)

        # Forward pass
        early_start: Dict[int, int] = {}
        early_finish: Dict[int, int] = {}
        for task_id in order:
            task = task_map[task_id]
            early_start[task_id] = max(
                (early_finish[dep_id] for dep_id in task.dependencies),
                default=0,
            )
            early_finish[task_id] = early_start[task_id] + task.duration

        project_duration = max(early_finish.values())

        # Backward pass
        late_start: Dict[int, int] = {}
        late_finish: Dict[int, int] = {}
        for task_id in reversed(order):
            late_finish[task_id] = min(
                (late_start[succ_id] for succ_id in successors[task_id]),
                default=project_duration,
            )
            late_start[task_id] = late_finish[task_id] - task_map[task_id].duration

        scheduled = []
        for task in tasks:
            total_float = late_start[task.id] - early_start[task.id]
            scheduled.append(ScheduledTask(
                task=task,
                early_start=early_start[task.id],
                early_finish=early_finish[task.id],
                late_start=late_start[task.id],
                late_finish=late_finish[task.id],
                total_float=total_float,
                is_critical=total_float == 0,
            ))

        result = ScheduleResult(
            tasks=tuple(scheduled),
            project_duration=project_duration,
            topological_order=tuple(order),
            run_id=run_id,
            computed_at=datetime.now(),
        )

        logger.info(f"Computed schedule for {len(tasks)} tasks, project duration {project_duration}")
        logger.info(f"Critical path: {result.critical_path_names}")

        return result

    def _validate(self, tasks: List[Task]) -> None:
        """Reject structurally invalid input before any pass."""
        seen = set()
        for task in tasks:
            if not _is_integer(task.duration) or task.duration < 0:
                raise InvalidDurationError(task.id, task.duration)
            if not _is_integer(task.id) or task.id <= 0:
                raise InvalidTaskIdError(task.id)
            if task.id in seen:
                raise DuplicateTaskIdError(task.id)
            seen.add(task.id)

        for task in tasks:
            for dep_id in task.dependencies:
                if dep_id not in seen:
                    raise DanglingDependencyError(task.id, dep_id)

    def _build_successors(self, tasks: List[Task]) -> Dict[int, List[int]]:
        """Map each task id to the ids of tasks that depend on it."""
        successors: Dict[int, List[int]] = {task.id: [] for task in tasks}
        for task in tasks:
            for dep_id in task.dependencies:
                successors[dep_id].append(task.id)
        return successors

    def _topological_order(self, tasks: List[Task], successors: Dict[int, List[int]]) -> List[int]:
        """Order task ids with Kahn's algorithm, raising on cycles."""
        in_degree = {task.id: len(task.dependencies) for task in tasks}
        queue = deque(task.id for task in tasks if in_degree[task.id] == 0)
        order = []

        while queue:
            task_id = queue.popleft()
            order.append(task_id)
            for succ_id in successors[task_id]:
                in_degree[succ_id] -= 1
                if in_degree[succ_id] == 0:
                    queue.append(succ_id)

        if len(order) < len(tasks):
            unordered = [task for task in tasks if in_degree[task.id] > 0]
            cycle = self._find_cycle(unordered)
            logger.error(f"Cyclic dependency detected: {cycle}")
            raise CyclicDependencyError(cycle)

        return order

    def _find_cycle(self, unordered: List[Task]) -> List[int]:
        """Walk dependency edges among unordered tasks until one repeats.

        Every task left over by Kahn's algorithm has at least one dependency
        that is also left over, so the walk always closes a cycle.
        """
        remaining = tasks_by_id(unordered)
        path: List[int] = []
        position: Dict[int, int] = {}
        task_id = unordered[0].id

        while task_id not in position:
            position[task_id] = len(path)
            path.append(task_id)
            task_id = min(dep_id for dep_id in remaining[task_id].dependencies if dep_id in remaining)

        return path[position[task_id]:]


def compute_schedule(tasks: Sequence[Task]) -> ScheduleResult:
    """Compute the schedule for tasks with a default calculator."""
    return ScheduleCalculator().compute(tasks)
