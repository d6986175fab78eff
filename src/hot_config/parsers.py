"""Built-in file parsers and file patterns.

A parser is any callable taking the decoded file text and returning the
parsed tree. Coroutine functions are accepted as well and are awaited by
the loader. Parsers signal failure by raising; the loader wraps whatever
they raise into ParserError.
"""

import json
import re
from collections.abc import Callable
from typing import Any

import yaml

Parser = Callable[[str], Any]


def parse_yaml(text: str) -> Any:
    """Parse YAML text with ``yaml.safe_load``."""
    return yaml.safe_load(text)


def parse_json(text: str) -> Any:
    """Parse JSON text."""
    return json.loads(text)


PARSERS: dict[str, Parser] = {
    "yaml": parse_yaml,
    "json": parse_json,
}

PATTERNS: dict[str, re.Pattern[str]] = {
    "yaml": re.compile(r"^.*\.(yaml|yml)$"),
    "json": re.compile(r"^.*\.json$"),
}
