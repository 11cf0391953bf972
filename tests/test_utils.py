"""
Unit tests for config loading, dependency strings and task files.
"""

import json
from pathlib import Path

import pytest

from critpath.models.task import Task
from critpath.utils.config import get_default_config, load_config
from critpath.utils.dependencies import DependencyParseError, format_dependencies, parse_dependencies
from critpath.utils.loader import (
    TaskFileError,
    load_tasks,
    next_task_id,
    sample_tasks,
    save_tasks,
)


class TestDependencyStrings:
    """Comma-separated dependency ids as typed by a user."""

    @pytest.mark.parametrize("text,expected", [
        ("", frozenset()),
        (None, frozenset()),
        ("1", frozenset({1})),
        ("4,5", frozenset({4, 5})),
        (" 1 , 2 ,, 3, ", frozenset({1, 2, 3})),
        ("2,2", frozenset({2})),
    ])
    def test_parse(self, text, expected):
        assert parse_dependencies(text) == expected

    @pytest.mark.parametrize("text", ["a", "1,x", "1.5"])
    def test_parse_rejects_non_integers(self, text):
        with pytest.raises(DependencyParseError):
            parse_dependencies(text)

    def test_format_is_sorted(self):
        assert format_dependencies({5, 4, 12}) == "4,5,12"
        assert format_dependencies(frozenset()) == ""


class TestTaskFiles:
    """Loading and saving task lists."""

    def test_load_yaml_with_string_and_list_dependencies(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text(
            "tasks:\n"
            "  - {id: 1, name: Dig, duration: 2}\n"
            "  - {id: 2, name: Pour, duration: 3, dependencies: '1'}\n"
            "  - {id: 3, name: Cure, duration: 7, dependencies: [1, 2]}\n",
            encoding='utf-8',
        )

        tasks = load_tasks(str(path))

        assert tasks == [
            Task(1, 'Dig', 2),
            Task(2, 'Pour', 3, frozenset({1})),
            Task(3, 'Cure', 7, frozenset({1, 2})),
        ]

    def test_load_json_list(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([{'id': 1, 'name': 'A', 'duration': 4, 'dependencies': []}]))

        assert load_tasks(str(path)) == [Task(1, 'A', 4)]

    def test_save_then_load(self, tmp_path, house_tasks):
        path = tmp_path / "house.json"
        save_tasks(house_tasks, str(path))

        assert load_tasks(str(path)) == house_tasks

    def test_missing_file(self, tmp_path):
        with pytest.raises(TaskFileError, match="not found"):
            load_tasks(str(tmp_path / "nope.yaml"))

    def test_missing_keys(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([{'id': 1, 'name': 'A'}]))

        with pytest.raises(TaskFileError, match="duration"):
            load_tasks(str(path))

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text("name: not tasks\n")

        with pytest.raises(TaskFileError):
            load_tasks(str(path))

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "tasks.txt"
        path.write_text("1,A,3")

        with pytest.raises(TaskFileError, match="Unsupported"):
            load_tasks(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "tasks.yaml"
        path.write_text("tasks:\n  - {id: 1, name: A, duration: [\n")

        with pytest.raises(TaskFileError, match="Invalid YAML"):
            load_tasks(str(path))

    @pytest.mark.parametrize("entries", [[1, 2], ["Dig"], [None]])
    def test_entry_not_a_mapping(self, tmp_path, entries):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps(entries))

        with pytest.raises(TaskFileError, match="must be a mapping"):
            load_tasks(str(path))

    def test_string_ids_in_dependency_list(self, tmp_path, calculator):
        """Quoted ids in a dependency list refer to the same tasks as bare ints."""
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([
            {"id": 1, "name": "Dig", "duration": 2},
            {"id": 2, "name": "Pour", "duration": 3, "dependencies": ["1"]},
            {"id": 3, "name": "Cure", "duration": 7, "dependencies": [" 2 ", 1]},
        ]))

        tasks = load_tasks(str(path))

        assert tasks[1].dependencies == frozenset({1})
        assert tasks[2].dependencies == frozenset({1, 2})
        assert calculator.compute(tasks).project_duration == 12

    @pytest.mark.parametrize("dependencies", [["x"], [1.5], [True], [[1]]])
    def test_invalid_dependency_list_entries(self, tmp_path, dependencies):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([
            {"id": 1, "name": "Dig", "duration": 2},
            {"id": 2, "name": "Pour", "duration": 3, "dependencies": dependencies},
        ]))

        with pytest.raises(DependencyParseError):
            load_tasks(str(path))

    def test_dependencies_of_wrong_type(self, tmp_path):
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps([{"id": 1, "name": "Dig", "duration": 2, "dependencies": {"a": 1}}]))

        with pytest.raises(TaskFileError, match="invalid dependencies"):
            load_tasks(str(path))

    def test_sample_tasks(self):
        tasks = sample_tasks()

        assert [task.name for task in tasks] == [
            'Site Clearing', 'Foundation', 'Framing', 'Roofing', 'Plumbing & Electrical', 'Finishing',
        ]
        assert tasks[5].dependencies == frozenset({4, 5})

    def test_next_task_id(self, house_tasks):
        assert next_task_id(house_tasks) == 7
        assert next_task_id([]) == 1
        assert next_task_id([Task(9, 'X', 1), Task(3, 'Y', 1)]) == 10


class TestConfig:
    """Configuration loading."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("risk_analysis:\n  language: hi\n")

        assert load_config(str(path)) == {'risk_analysis': {'language': 'hi'}}

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({'output': {'results_dir': 'out'}}))

        assert load_config(str(path))['output']['results_dir'] == 'out'

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")

        assert load_config(str(path)) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[x]")

        with pytest.raises(ValueError):
            load_config(str(path))

    def test_top_level_list(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("output: [\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(str(path))

    def test_defaults(self):
        config = get_default_config()

        assert config['risk_analysis']['model'] == 'gemini-2.5-flash'
        assert config['risk_analysis']['temperature'] == 0.6
        assert config['output']['results_dir'] == 'results'


class TestBundledData:

    def test_house_schedule_matches_sample(self):
        path = Path(__file__).parent.parent / 'data' / 'house.yaml'

        assert load_tasks(str(path)) == sample_tasks()
