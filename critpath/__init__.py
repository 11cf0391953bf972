"""Critical Path Method schedule calculator."""

from .engine import (
    CyclicDependencyError,
    DanglingDependencyError,
    InvalidDurationError,
    ScheduleCalculator,
    SchedulingError,
    compute_schedule,
)
from .models import ScheduledTask, ScheduleResult, ScheduleRisk, Task

__version__ = '0.1.0'

__all__ = [
    'Task',
    'ScheduledTask',
    'ScheduleResult',
    'ScheduleRisk',
    'ScheduleCalculator',
    'compute_schedule',
    'SchedulingError',
    'CyclicDependencyError',
    'DanglingDependencyError',
    'InvalidDurationError',
]
