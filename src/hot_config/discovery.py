"""Recursive file discovery."""

import logging
import os
import re
from pathlib import Path

from .exceptions import ConfigFileError

logger = logging.getLogger(__name__)


def find_files(directory: Path, pattern: re.Pattern[str]) -> list[Path]:
    """Find files under a directory whose full path matches a pattern.

    The walk is recursive and the result is sorted so that repeated calls on
    an unchanged tree return the same order.

    Args:
        directory: Root directory to search
        pattern: Compiled regex searched against each file's full path

    Returns:
        Sorted list of matching file paths

    Raises:
        ConfigFileError: If the directory is missing or cannot be listed
    """
    if not directory.is_dir():
        raise ConfigFileError(f"Configuration directory not found: {directory}")

    def _on_error(error: OSError) -> None:
        raise ConfigFileError(f"Failed to list configuration directory {error.filename}: {error}") from error

    matches = []
    for root, _dirs, files in os.walk(directory, onerror=_on_error):
        for name in files:
            path = Path(root) / name
            if pattern.search(str(path)):
                matches.append(path)

    return sorted(matches)
