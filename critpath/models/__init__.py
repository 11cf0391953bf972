"""Schedule data models."""

from .result import ScheduleResult
from .task import ScheduledTask, ScheduleRisk, Task

__all__ = ['Task', 'ScheduledTask', 'ScheduleRisk', 'ScheduleResult']
