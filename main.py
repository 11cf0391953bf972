"""Main entry point for the critical path schedule calculator."""

import argparse
import json
import logging
import sys
from pathlib import Path

from critpath.analysis import RiskAnalysisError
from critpath.analysis.gemini import GeminiRiskAnalyzer
from critpath.engine.errors import SchedulingError
from critpath.engine.scheduler import ScheduleCalculator
from critpath.evaluation.generator import TaskGenerator
from critpath.evaluation.validator import ScheduleValidator
from critpath.utils.config import load_config, get_default_config
from critpath.utils.dependencies import DependencyParseError
from critpath.utils.loader import TaskFileError, load_tasks, sample_tasks, save_tasks

logger = logging.getLogger(__name__)


def _load_config(config_path: str) -> dict:
    """Load the config file, falling back to defaults when it does not exist."""
    if config_path and Path(config_path).exists():
        config = get_default_config()
        for section, values in load_config(config_path).items():
            if isinstance(values, dict):
                config.setdefault(section, {}).update(values)
            else:
                config[section] = values
        return config
    return get_default_config()


def _load_tasks(tasks_path: str):
    if tasks_path:
        return load_tasks(tasks_path)
    print("No task file given, using the sample schedule")
    return sample_tasks()


def run_scheduling(config: dict, tasks_path: str = None, output_dir: str = None):
    """Compute the schedule and save it as JSON and a readable log."""
    tasks = _load_tasks(tasks_path)

    calculator = ScheduleCalculator()
    result = calculator.compute(tasks)

    violations = ScheduleValidator().validate(result)
    for violation in violations:
        logger.warning(f"Schedule invariant violated: {violation}")

    # Output results
    print(f"\nScheduled {len(result.tasks)} tasks")
    print(f"Project duration: {result.project_duration}")
    print(f"Critical path: {' -> '.join(result.critical_path_names)}")

    results_dir = Path(output_dir or config.get('output', {}).get('results_dir', 'results'))
    results_dir.mkdir(parents=True, exist_ok=True)

    result_path = results_dir / f"schedule_{result.run_id}.json"
    with open(result_path, 'w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, indent=2, default=str)

    log_path = results_dir / f"schedule_{result.run_id}.log"
    with open(log_path, 'w', encoding='utf-8') as f:
        f.write(result.to_human_readable())

    print(f"\nSchedule saved to: {result_path}")
    print(f"Human-readable log saved to: {log_path}")

    return result


def run_generation(config: dict, count: int = None, seed: int = 42, output_dir: str = None):
    """Generate a random acyclic task network and save it."""
    generator = TaskGenerator(seed=seed, config=config)
    tasks = generator.generate_tasks(count=count)

    results_dir = Path(output_dir or config.get('output', {}).get('results_dir', 'results'))
    results_dir.mkdir(parents=True, exist_ok=True)

    tasks_path = results_dir / "generated_tasks.json"
    save_tasks(tasks, str(tasks_path))

    print(f"Generated {len(tasks)} tasks")
    print(f"Tasks saved to: {tasks_path}")

    return tasks


def run_risk_analysis(config: dict, tasks_path: str = None, location: str = None, language: str = None):
    """Compute the schedule and ask the risk analyzer about its critical path."""
    tasks = _load_tasks(tasks_path)
    result = ScheduleCalculator().compute(tasks)

    analyzer = GeminiRiskAnalyzer(config)
    risks = analyzer.analyze_result(result, location=location, language=language)

    print(f"\nRisk analysis by {analyzer.get_analyzer_name()}")
    print(f"Project duration: {result.project_duration}")
    print(f"Critical path: {' -> '.join(result.critical_path_names)}\n")
    for risk in risks:
        print(f"* {risk.risk}")
        print(f"    Impact: {risk.impact}")
        print(f"    Mitigation: {risk.mitigation}")

    return risks


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Critical Path Method schedule calculator"
    )
    parser.add_argument(
        'command',
        choices=['schedule', 'generate-tasks', 'analyze-risks'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--tasks',
        type=str,
        default=None,
        help='Path to a YAML or JSON task file (default: built-in sample schedule)'
    )
    parser.add_argument(
        '--output-dir',
        type=str,
        default=None,
        help='Directory for result files (default: output.results_dir from config)'
    )
    parser.add_argument(
        '--count',
        type=int,
        default=None,
        help='Number of tasks to generate'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=42,
        help='Random seed for task generation (default: 42)'
    )
    parser.add_argument(
        '--location',
        type=str,
        default=None,
        help='Project location for risk analysis'
    )
    parser.add_argument(
        '--language',
        type=str,
        choices=['en', 'hi', 'bn'],
        default=None,
        help='Language of the risk analysis'
    )

    args = parser.parse_args(argv)
    try:
        config = _load_config(args.config)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.get('logging', {}).get('level', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        if args.command == 'schedule':
            run_scheduling(config, args.tasks, args.output_dir)
        elif args.command == 'generate-tasks':
            run_generation(config, args.count, args.seed, args.output_dir)
        elif args.command == 'analyze-risks':
            run_risk_analysis(config, args.tasks, args.location, args.language)
    except (SchedulingError, TaskFileError, DependencyParseError) as e:
        print(f"Failed to calculate schedule: {e}", file=sys.stderr)
        return 1
    except RiskAnalysisError as e:
        print(f"Risk analysis failed: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
