"""Property paths into component props and structural value cloning."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Union

from markdoc2doc.exceptions import PropPathError

PropPathSegment = Union[str, int, float]
PropPath = tuple[PropPathSegment, ...]


def is_prop_path(value: Any) -> bool:
    """Return True if ``value`` is a list of string or number segments."""
    if not isinstance(value, (list, tuple)):
        return False
    return all(
        isinstance(segment, str) or (isinstance(segment, (int, float)) and not isinstance(segment, bool))
        for segment in value
    )


def get_value_at_prop_path(
    value: Any, path: Sequence[PropPathSegment], *, create_missing: bool = False
) -> Any:
    """Walk ``path`` through nested dicts and lists.

    Args:
        value: The props value to walk.
        path: Segments to follow.
        create_missing: If True, a key missing from a dict is created as an
            empty dict before descending into it.

    Raises:
        PropPathError: If a segment does not exist in the value it indexes.
    """
    current = value
    for depth, segment in enumerate(path):
        if create_missing and isinstance(current, dict) and segment not in current:
            current[segment] = {}
        try:
            current = current[segment]
        except (KeyError, IndexError, TypeError) as exc:
            raise PropPathError(
                f"Cannot resolve segment {segment!r} of prop path {list(path)!r} at depth {depth}"
            ) from exc
    return current


def clone_value(value: Any) -> Any:
    """Deep-copy a JSON-like value tree (dicts, lists and scalars)."""
    if isinstance(value, dict):
        return {key: clone_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [clone_value(item) for item in value]
    return value
