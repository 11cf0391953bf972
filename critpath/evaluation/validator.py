"""Consistency checks for computed schedules."""

from typing import Dict, List, Optional

from ..models.result import ScheduleResult
from ..models.task import ScheduledTask


class ScheduleValidator:
    """Checks the invariants a computed schedule must satisfy."""

    def validate(self, result: ScheduleResult) -> List[str]:
        """Return a list of invariant violations; empty when the schedule is valid."""
        violations = []
        tasks = result.by_id

        if not result.tasks:
            if result.project_duration != 0:
                violations.append(f"Empty schedule has duration {result.project_duration}")
            return violations

        for task in result.tasks:
            violations.extend(self._check_task(task))

            for dep_id in task.dependencies:
                dependency = tasks.get(dep_id)
                if dependency is None:
                    violations.append(f"Task {task.id}: unknown dependency {dep_id}")
                    continue
                if task.early_start < dependency.early_finish:
                    violations.append(
                        f"Task {task.id}: early start {task.early_start} before "
                        f"dependency {dep_id} early finish {dependency.early_finish}"
                    )
                if dependency.late_finish > task.late_start:
                    violations.append(
                        f"Task {dep_id}: late finish {dependency.late_finish} after "
                        f"successor {task.id} late start {task.late_start}"
                    )

        max_early_finish = max(task.early_finish for task in result.tasks)
        if result.project_duration != max_early_finish:
            violations.append(
                f"Project duration {result.project_duration} != max early finish {max_early_finish}"
            )

        max_sink_late_finish = max(task.late_finish for task in result.sinks)
        if result.project_duration != max_sink_late_finish:
            violations.append(
                f"Project duration {result.project_duration} != max sink late finish {max_sink_late_finish}"
            )

        if not violations and self.find_critical_chain(result) is None:
            violations.append("No critical chain connects a source to a sink")

        return violations

    def is_valid(self, result: ScheduleResult) -> bool:
        return not self.validate(result)

    def _check_task(self, task: ScheduledTask) -> List[str]:
        violations = []
        if task.early_finish != task.early_start + task.duration:
            violations.append(f"Task {task.id}: early finish != early start + duration")
        if task.late_finish - task.late_start != task.duration:
            violations.append(f"Task {task.id}: late finish - late start != duration")
        if task.total_float != task.late_start - task.early_start:
            violations.append(f"Task {task.id}: float != late start - early start")
        if task.total_float < 0:
            violations.append(f"Task {task.id}: negative float {task.total_float}")
        if task.is_critical != (task.total_float == 0):
            violations.append(f"Task {task.id}: critical flag disagrees with float")
        return violations

    def find_critical_chain(self, result: ScheduleResult) -> Optional[List[ScheduledTask]]:
        """Find one chain of critical tasks from a source to a sink.

        The chain must be contiguous in time (each task starts when its
        predecessor on the chain finishes) and span the project duration.
        """
        tasks = result.by_id
        sink_ids = {task.id for task in result.sinks}
        successors: Dict[int, List[int]] = {task_id: [] for task_id in tasks}
        for task in result.tasks:
            for dep_id in task.dependencies:
                if dep_id in successors:
                    successors[dep_id].append(task.id)

        # task id -> next id on a chain that reaches a sink (None at the sink)
        next_on_chain: Dict[int, Optional[int]] = {}
        for task_id in reversed(result.topological_order):
            task = tasks[task_id]
            if not task.is_critical:
                continue
            if task_id in sink_ids:
                if task.early_finish == result.project_duration:
                    next_on_chain[task_id] = None
                continue
            for succ_id in successors[task_id]:
                if succ_id in next_on_chain and tasks[succ_id].early_start == task.early_finish:
                    next_on_chain[task_id] = succ_id
                    break

        for source in result.sources:
            if source.id in next_on_chain and source.early_start == 0:
                chain = []
                task_id = source.id
                while task_id is not None:
                    chain.append(tasks[task_id])
                    task_id = next_on_chain[task_id]
                return chain

        return None
