"""Utility functions for hot-config."""

import copy
import re
from collections.abc import Callable
from pathlib import PurePath
from typing import Any


_WORD_SPLIT = re.compile(r"[\W_]+")
_RUN = re.compile(r"\d+|[^\W\d_]+")


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries with overlay precedence.

    Recursively merges nested dictionaries. Non-dict values in overlay
    completely replace corresponding values in base.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified and share
        no mutable values with the result)

    Examples:
        >>> base = {"a": 1, "b": {"c": 2, "d": 3}}
        >>> overlay = {"b": {"c": 20}, "e": 5}
        >>> deep_merge(base, overlay)
        {'a': 1, 'b': {'c': 20, 'd': 3}, 'e': 5}

        >>> deep_merge({}, {"a": 1})
        {'a': 1}
    """
    result = copy.deepcopy(base)

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            # Both base and overlay have dict at this key - recurse
            result[key] = deep_merge(result[key], value)
        else:
            # Overlay wins - replace completely
            result[key] = copy.deepcopy(value)

    return result


def resolve_profile(tree: Any, default_profile: str, active_profile: str | None) -> dict[str, Any]:
    """Compute the effective value of one parsed file.

    The file is expected to map profile names to sections. The result is the
    default section with the active section deep merged over it. A missing
    or non-mapping section counts as empty.

    Examples:
        >>> tree = {"default": {"a": 1, "b": 2}, "production": {"b": 3}}
        >>> resolve_profile(tree, "default", "production")
        {'a': 1, 'b': 3}
        >>> resolve_profile(tree, "default", None)
        {'a': 1, 'b': 2}
    """
    if not isinstance(tree, dict):
        return {}

    default = _section(tree, default_profile)
    if active_profile is None or active_profile == default_profile:
        return deep_merge({}, default)
    return deep_merge(default, _section(tree, active_profile))


def _section(tree: dict[str, Any], name: str) -> dict[str, Any]:
    section = tree.get(name)
    return section if isinstance(section, dict) else {}


def camel_case(segment: str) -> str:
    """Convert a path segment to camelCase.

    Words are split on any non-word character, on underscores, between
    letters and digits, and on case humps. Letters from any script count;
    scripts without case (e.g. CJK) stay as they are.

    Examples:
        >>> camel_case("path-with-dashes")
        'pathWithDashes'
        >>> camel_case("path_with_underscores")
        'pathWithUnderscores'
        >>> camel_case("conf1")
        'conf1'
        >>> camel_case("café-menu")
        'caféMenu'
    """
    words = [word for part in _WORD_SPLIT.split(segment) for run in _RUN.findall(part) for word in _humps(run)]
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def _humps(run: str) -> list[str]:
    # "fooBar" -> foo|Bar, "HTTPServer" -> HTTP|Server
    words = []
    start = 0
    for i in range(1, len(run)):
        prev, char = run[i - 1], run[i]
        nxt = run[i + 1] if i + 1 < len(run) else ""
        if char.isupper() and (prev.islower() or (prev.isupper() and nxt.islower())):
            words.append(run[start:i])
            start = i
    words.append(run[start:])
    return words


def key_path(relative: PurePath, transform: Callable[[str], str]) -> tuple[str, ...]:
    """Map a file path relative to the load root to a store key path.

    The file extension is dropped and each segment goes through
    ``transform``. A segment the transform turns into an empty string is
    kept as-is, so every file gets its own subtree.

    Examples:
        >>> key_path(PurePath("db/mongo.yaml"), camel_case)
        ('db', 'mongo')
    """
    parts = relative.with_suffix("").parts
    return tuple(transform(part) or part for part in parts)


def set_path(target: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    """Assign value at a nested key path, creating intermediate dicts.

    A non-dict found at an intermediate level is replaced by a dict.
    """
    node = target
    for name in path[:-1]:
        child = node.get(name)
        if not isinstance(child, dict):
            child = {}
            node[name] = child
        node = child
    node[path[-1]] = value
