"""Configuration management."""

import json
import yaml
from pathlib import Path
from typing import Dict, Any


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            try:
                config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
        elif path.suffix.lower() == '.json':
            config = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")

    return config


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'output': {
            'results_dir': 'results',
        },
        'generator': {
            'task_count': 20,
            'min_duration': 0,
            'max_duration': 15,
            'dependency_probability': 0.6,
            'max_dependencies': 3,
        },
        'risk_analysis': {
            'model': 'gemini-2.5-flash',
            'temperature': 0.6,
            'max_risks': 3,
            'location': 'Mumbai',
            'language': 'en',
            'retry_max_attempts': 5,
            'retry_base_delay_seconds': 1.0,
            'retry_max_delay_seconds': 60.0,
        },
        'logging': {
            'level': 'INFO',
        },
    }
