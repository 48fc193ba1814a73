"""Dotted field paths and wildcard expansion over nested data.

A path such as ``users.0.email`` walks mappings by key, lists by index and
other objects by attribute. A ``*`` segment is a wildcard: it stands for
every key (or index) of the object found at that point.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."
WILDCARD = "*"

_MISSING = object()


def split_path(path: str) -> list[str]:
    return path.split(PATH_SEPARATOR) if path else []


def has_wildcard(path: str) -> bool:
    """Check whether a field path contains a ``*`` segment."""
    return WILDCARD in split_path(path)


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(segment, _MISSING)
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        if segment.isdigit() and int(segment) < len(node):
            return node[int(segment)]
        return _MISSING
    if node is None or isinstance(node, (str, bytes, int, float, bool)):
        return _MISSING
    if segment.startswith("_"):
        return _MISSING
    return getattr(node, segment, _MISSING)


def data_get(data: Any, path: str, default: Any = None) -> Any:
    """Look up a dotted path in nested data.

    Missing segments resolve to ``default`` rather than raising.

    Example:
        data_get({"user": {"tags": ["a", "b"]}}, "user.tags.1")  # -> "b"
        data_get({"user": {}}, "user.email", "")                 # -> ""
    """
    node = data
    for segment in split_path(path):
        node = _child(node, segment)
        if node is _MISSING:
            return default
    return node


def _keys_of(node: Any) -> list[str] | None:
    if isinstance(node, Mapping):
        return [str(key) for key in node.keys()]
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        return [str(index) for index in range(len(node))]
    return None


def _expand(segments: list[str], node: Any, prefix: list[str]) -> list[str]:
    if WILDCARD not in segments:
        return [PATH_SEPARATOR.join(prefix + segments)]

    position = segments.index(WILDCARD)
    head = segments[:position]
    target = data_get(node, PATH_SEPARATOR.join(head)) if head else node
    keys = _keys_of(target)
    if keys is None:
        return []

    paths: list[str] = []
    for key in keys:
        paths.extend(
            _expand(segments[position + 1:], _child(target, key), prefix + head + [key])
        )
    return paths


def expand_wildcard(pattern: str, data: Any) -> list[str]:
    """Expand a wildcard field path against ``data`` into concrete paths.

    Each ``*`` enumerates the keys of a mapping or the indices of a list;
    several wildcards (``a.*.b.*``) expand recursively. A prefix that is
    absent or not a container yields no paths. Literal segments after the
    last wildcard are appended whether or not they exist in the data.

    Example:
        expand_wildcard("users.*", {"users": {"a": 1, "b": 2}})
        # -> ["users.a", "users.b"]
        expand_wildcard("items.*.qty", {"items": [{"qty": 1}, {}]})
        # -> ["items.0.qty", "items.1.qty"]
    """
    paths = _expand(split_path(pattern), data, [])
    logger.debug("Expanded %s into %d paths", pattern, len(paths))
    return paths
