"""Load orchestration: discover, read, parse, resolve profiles, commit."""

import asyncio
import inspect
import logging
from collections.abc import Callable
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .discovery import find_files
from .exceptions import ConfigFileError
from .exceptions import ParserError
from .manager import StoreManager
from .models import ConfigEntry
from .models import LoadOptions
from .models import resolve_options
from .utils import key_path
from .utils import resolve_profile

logger = logging.getLogger(__name__)

Callback = Callable[[BaseException | None, Any], None]


class Loader:
    """Drives load calls against one StoreManager.

    Each call runs Discover -> Load files -> Resolve profiles -> Commit.
    Every stage finishes before the next one starts, and any failure aborts
    the call before the store is touched.

    Args:
        manager: Store manager receiving committed entries
    """

    def __init__(self, manager: StoreManager):
        self.manager = manager

    async def load(
        self,
        directory: str | Path,
        options: LoadOptions | Mapping[str, Any] | None = None,
        *,
        callback: Callback | None = None,
        **overrides: Any,
    ) -> Any:
        """Load a configuration directory.

        Args:
            directory: Root directory to load (relative to the working directory)
            options: LoadOptions or mapping of option names to values
            callback: Optional ``callback(error, tree)``; when given, errors are
                passed to it instead of being raised
            **overrides: Individual options

        Returns:
            The store on a real load, an independent dict on a dry run, or None
            when a callback received an error

        Raises:
            ConfigFileError: If the directory or a file cannot be read
            ParserError: If a file cannot be parsed
            ConfigValidationError: If the options are invalid
        """
        try:
            tree = await self._run(directory, options, overrides)
        except Exception as e:
            if callback is None:
                raise
            logger.error(f"Configuration load failed: {e}")
            callback(e, None)
            return None

        if callback is not None:
            callback(None, tree)
        return tree

    async def _run(self, directory: str | Path, options: Any, overrides: dict[str, Any]) -> Any:
        opts = resolve_options(options, **overrides)
        root = Path(directory).resolve()
        logger.info(f"Loading configuration from {root}")

        files = await asyncio.to_thread(find_files, root, opts.pattern)
        if not files:
            logger.warning(f"No configuration files matching {opts.pattern.pattern!r} in {root}")
        else:
            logger.debug(f"Found configuration files: {[str(f) for f in files]}")

        parsed = await self._load_files(root, files, opts)

        entries = [
            ConfigEntry(
                path=entry.path,
                value=resolve_profile(entry.value, opts.default_profile, opts.active_profile),
                source=entry.source,
            )
            for entry in parsed
        ]

        if opts.dry_run:
            return self.manager.dry_run(entries)
        return self.manager.commit(entries)

    async def _load_files(self, root: Path, files: list[Path], opts: LoadOptions) -> list[ConfigEntry]:
        # The first failure cancels the remaining files and is raised alone.
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(self._load_file(root, path, opts)) for path in files]
        except ExceptionGroup as errors:
            raise errors.exceptions[0]
        return [task.result() for task in tasks]

    async def _load_file(self, root: Path, path: Path, opts: LoadOptions) -> ConfigEntry:
        try:
            text = await asyncio.to_thread(path.read_text, encoding=opts.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileError(f"Failed to read configuration from {path}: {e}") from e

        try:
            if inspect.iscoroutinefunction(opts.parser):
                value = await opts.parser(text)
            else:
                value = await asyncio.to_thread(opts.parser, text)
        except Exception as e:
            raise ParserError(path, e) from e

        if value is None:
            value = {}
        elif not isinstance(value, dict):
            logger.warning(f"Ignoring {path}: top level is {type(value).__name__}, expected a mapping of profiles")

        entry = ConfigEntry(path=key_path(path.relative_to(root), opts.normalizer), value=value, source=path)
        logger.debug(f"Parsed {path} as '{entry.dotted}'")
        return entry
