"""Data models for hot-config."""

import dataclasses
import os
import re
from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .exceptions import ConfigValidationError
from .parsers import PARSERS
from .parsers import PATTERNS
from .parsers import Parser
from .parsers import parse_yaml
from .utils import camel_case

ACTIVE_PROFILE_ENV = "APP_ENV"


@dataclass(frozen=True)
class LoadOptions:
    """Options for one load call.

    Attributes:
        pattern: Regex searched against each file path to select config files
        encoding: Text encoding used to read files
        parser: Callable turning file text into a parsed tree
        normalizer: Per-segment transform used to build store key paths
        default_profile: Profile section every file starts from
        active_profile: Profile section merged over the default (None for none)
        dry_run: Compute the result without touching the store
    """

    pattern: re.Pattern[str] = PATTERNS["yaml"]
    encoding: str = "utf-8"
    parser: Parser = parse_yaml
    normalizer: Callable[[str], str] = camel_case
    default_profile: str = "default"
    active_profile: str | None = None
    dry_run: bool = False


@dataclass(frozen=True)
class ConfigEntry:
    """One parsed file, keyed by its store path."""

    path: tuple[str, ...]
    value: Any
    source: Path

    @property
    def dotted(self) -> str:
        return ".".join(self.path)


_OPTION_NAMES = frozenset(field.name for field in dataclasses.fields(LoadOptions))


def resolve_options(options: LoadOptions | Mapping[str, Any] | None = None, **overrides: Any) -> LoadOptions:
    """Overlay caller options onto the built-in defaults.

    The active profile defaults to the ``APP_ENV`` environment variable, read
    at call time. A string pattern is compiled, and a string parser is looked
    up by name in PARSERS.

    Args:
        options: LoadOptions instance or mapping of option names to values
        **overrides: Individual options (take precedence over ``options``)

    Returns:
        New LoadOptions instance

    Raises:
        ConfigValidationError: If an option name or value is invalid
    """
    if isinstance(options, LoadOptions):
        base = options
        values: dict[str, Any] = {}
    else:
        base = LoadOptions(active_profile=os.environ.get(ACTIVE_PROFILE_ENV) or None)
        values = dict(options or {})
    values.update(overrides)

    unknown = set(values) - _OPTION_NAMES
    if unknown:
        raise ConfigValidationError(f"Unknown load options: {', '.join(sorted(unknown))}")

    if "pattern" in values:
        values["pattern"] = _compile_pattern(values["pattern"])
    if "parser" in values:
        values["parser"] = _lookup_parser(values["parser"])
    if "normalizer" in values and not callable(values["normalizer"]):
        raise ConfigValidationError(f"Normalizer must be callable, got {values['normalizer']!r}")

    return dataclasses.replace(base, **values)


def _compile_pattern(pattern: Any) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        try:
            return re.compile(pattern)
        except re.error as e:
            raise ConfigValidationError(f"Invalid file pattern {pattern!r}: {e}") from e
    raise ConfigValidationError(f"File pattern must be a string or compiled regex, got {pattern!r}")


def _lookup_parser(parser: Any) -> Parser:
    if isinstance(parser, str):
        if parser not in PARSERS:
            raise ConfigValidationError(f"Unknown parser '{parser}' (known: {', '.join(sorted(PARSERS))})")
        return PARSERS[parser]
    if not callable(parser):
        raise ConfigValidationError(f"Parser must be callable, got {parser!r}")
    return parser
