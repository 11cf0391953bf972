"""Pytest configuration and fixtures."""
import pytest
from typing import List

from critpath.engine.scheduler import ScheduleCalculator
from critpath.models.task import Task
from critpath.utils.config import get_default_config
from critpath.utils.loader import sample_tasks


@pytest.fixture
def calculator() -> ScheduleCalculator:
    return ScheduleCalculator()


@pytest.fixture
def config() -> dict:
    return get_default_config()


@pytest.fixture
def linear_tasks() -> List[Task]:
    """Three tasks in a single chain."""
    return [
        Task(1, 'Clear', 3),
        Task(2, 'Found', 7, frozenset({1})),
        Task(3, 'Frame', 10, frozenset({2})),
    ]


@pytest.fixture
def house_tasks() -> List[Task]:
    """Diverge/converge sample schedule."""
    return sample_tasks()
