"""Conversion between dependency strings and id sets."""

from typing import Any, FrozenSet, Iterable


class DependencyParseError(ValueError):
    """A dependency string contains a token that is not an integer id."""


def parse_dependencies(text: str) -> FrozenSet[int]:
    """Parse a comma-separated dependency string such as ``"1, 2"``.

    Blank tokens are ignored, so ``""`` and ``"1,,2,"`` are accepted.
    """
    if text is None:
        return frozenset()

    ids = set()
    for token in str(text).split(','):
        token = token.strip()
        if not token:
            continue
        try:
            ids.add(int(token))
        except ValueError:
            raise DependencyParseError(f"Invalid dependency id: {token!r}") from None
    return frozenset(ids)


def normalize_dependencies(values: Iterable[Any]) -> FrozenSet[int]:
    """Convert a list of ids, as ints or digit strings, to a set of ints."""
    ids = set()
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise DependencyParseError(f"Invalid dependency id: {value!r}")
        if isinstance(value, int):
            ids.add(value)
        else:
            ids.update(parse_dependencies(value))
    return frozenset(ids)


def format_dependencies(ids: Iterable[int]) -> str:
    """Format dependency ids as an ascending comma-separated string."""
    return ','.join(str(task_id) for task_id in sorted(ids))
