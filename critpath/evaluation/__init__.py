"""Generation and validation of schedules."""

from .generator import TaskGenerator
from .validator import ScheduleValidator

__all__ = ['TaskGenerator', 'ScheduleValidator']
