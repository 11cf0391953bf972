"""Random task network generator."""

import random
from typing import List

from ..models.task import Task


class TaskGenerator:
    """Generates deterministic acyclic task networks for demos and checks."""

    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.generator_config = self.config.get('generator', {})

    def generate_tasks(
        self,
        count: int = None,
        min_duration: int = None,
        max_duration: int = None,
        dependency_probability: float = None,
        max_dependencies: int = None,
    ) -> List[Task]:
        """Generate an acyclic set of tasks.

        Tasks are built in a hidden creation order and may only depend on
        earlier-created tasks. Ids are then shuffled, so a dependency id is
        often larger than the id of the task that depends on it.
        """
        count = count if count is not None else self.generator_config.get('task_count', 20)
        min_duration = min_duration if min_duration is not None else self.generator_config.get('min_duration', 0)
        max_duration = max_duration if max_duration is not None else self.generator_config.get('max_duration', 15)
        dependency_probability = (
            dependency_probability if dependency_probability is not None
            else self.generator_config.get('dependency_probability', 0.6)
        )
        max_dependencies = (
            max_dependencies if max_dependencies is not None
            else self.generator_config.get('max_dependencies', 3)
        )

        ids = list(range(1, count + 1))
        self.random.shuffle(ids)

        tasks = []
        for i, task_id in enumerate(ids):
            duration = self.random.randint(min_duration, max_duration)

            dependencies = set()
            if i > 0 and self.random.random() < dependency_probability:
                fan_in = self.random.randint(1, min(max_dependencies, i))
                dependencies = set(self.random.sample(ids[:i], fan_in))

            tasks.append(Task(
                id=task_id,
                name=f"Task {task_id}",
                duration=duration,
                dependencies=frozenset(dependencies),
            ))

        # Present tasks in ascending id order, as a caller's table would
        return sorted(tasks, key=lambda t: t.id)

    def generate_chain(self, count: int, duration: int = 1) -> List[Task]:
        """Generate a single linear chain of tasks."""
        return [
            Task(
                id=i,
                name=f"Step {i}",
                duration=duration,
                dependencies=frozenset({i - 1}) if i > 1 else frozenset(),
            )
            for i in range(1, count + 1)
        ]
