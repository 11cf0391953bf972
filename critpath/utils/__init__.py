"""Utility functions."""

from .config import load_config, get_default_config
from .dependencies import DependencyParseError, format_dependencies, normalize_dependencies, parse_dependencies
from .loader import TaskFileError, load_tasks, next_task_id, sample_tasks, save_tasks

__all__ = [
    'load_config',
    'get_default_config',
    'parse_dependencies',
    'normalize_dependencies',
    'format_dependencies',
    'DependencyParseError',
    'load_tasks',
    'save_tasks',
    'sample_tasks',
    'next_task_id',
    'TaskFileError',
]
