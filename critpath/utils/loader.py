"""Loading task lists from files."""

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

from ..models.task import Task
from .dependencies import normalize_dependencies, parse_dependencies


class TaskFileError(ValueError):
    """A task file is missing, unreadable or malformed."""


REQUIRED_KEYS = ('id', 'name', 'duration')


def sample_tasks() -> List[Task]:
    """Return the built-in residential construction schedule."""
    return [
        Task(1, 'Site Clearing', 3),
        Task(2, 'Foundation', 7, frozenset({1})),
        Task(3, 'Framing', 10, frozenset({2})),
        Task(4, 'Roofing', 5, frozenset({3})),
        Task(5, 'Plumbing & Electrical', 8, frozenset({3})),
        Task(6, 'Finishing', 6, frozenset({4, 5})),
    ]


def next_task_id(tasks: Sequence[Task]) -> int:
    """Return the id for a newly added task."""
    return max((task.id for task in tasks), default=0) + 1


def task_from_dict(data: Dict[str, Any]) -> Task:
    """Build a task from a mapping as found in a task file."""
    if not isinstance(data, dict):
        raise TaskFileError(f"Task entry {data!r} must be a mapping")

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise TaskFileError(f"Task entry {data!r} is missing keys: {', '.join(missing)}")

    dependencies = data.get('dependencies') or []
    if isinstance(dependencies, (str, int)):
        dependencies = parse_dependencies(str(dependencies))
    elif isinstance(dependencies, list):
        dependencies = normalize_dependencies(dependencies)
    else:
        raise TaskFileError(f"Task {data['id']!r} has invalid dependencies: {dependencies!r}")

    return Task(
        id=data['id'],
        name=str(data['name']),
        duration=data['duration'],
        dependencies=frozenset(dependencies),
    )


def task_to_dict(task: Task) -> Dict[str, Any]:
    return {
        'id': task.id,
        'name': task.name,
        'duration': task.duration,
        'dependencies': sorted(task.dependencies),
    }


def load_tasks(tasks_path: str) -> List[Task]:
    """Load tasks from a YAML or JSON file.

    The file holds either a list of task mappings or a mapping with a
    ``tasks`` key. Dependencies may be a list of ids or a string like "1,2".
    """
    path = Path(tasks_path)

    if not path.exists():
        raise TaskFileError(f"Task file not found: {tasks_path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise TaskFileError(f"Invalid YAML in {tasks_path}: {e}") from e
        elif path.suffix.lower() == '.json':
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise TaskFileError(f"Invalid JSON in {tasks_path}: {e}") from e
        else:
            raise TaskFileError(f"Unsupported task file format: {path.suffix}")

    if isinstance(data, dict):
        data = data.get('tasks')

    if not isinstance(data, list):
        raise TaskFileError(f"Task file {tasks_path} must contain a list of tasks")

    return [task_from_dict(entry) for entry in data]


def save_tasks(tasks: Sequence[Task], tasks_path: str) -> None:
    """Write tasks to a JSON file readable by load_tasks."""
    with open(tasks_path, 'w', encoding='utf-8') as f:
        json.dump([task_to_dict(task) for task in tasks], f, indent=2)
