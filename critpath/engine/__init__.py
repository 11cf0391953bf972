"""Schedule calculation engine."""

from .errors import (
    CyclicDependencyError,
    DanglingDependencyError,
    DuplicateTaskIdError,
    InvalidDurationError,
    InvalidTaskIdError,
    SchedulingError,
)
from .scheduler import ScheduleCalculator, compute_schedule

__all__ = [
    'ScheduleCalculator',
    'compute_schedule',
    'SchedulingError',
    'CyclicDependencyError',
    'DanglingDependencyError',
    'DuplicateTaskIdError',
    'InvalidDurationError',
    'InvalidTaskIdError',
]
