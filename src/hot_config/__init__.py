"""hot-config: Directory-based configuration loading with in-place reload.

This library loads every configuration file under a directory, resolves the
active profile inside each file, and publishes the result in a single
process-wide store. Each file lands at a key path built from its location
relative to the directory: ``db/mongo.yaml`` becomes ``store["db"]["mongo"]``.

Reloads replace the store's contents, never the store itself, so any
reference to ``hot_config.store`` always sees the latest configuration.

Public API:
    store: The process-wide ConfigStore
    load: Coroutine loading a directory into the store (or a dry-run tree)
    load_sync: Blocking wrapper around load
    clear: Empty the store
    PARSERS, PATTERNS: Built-in parsers and file patterns keyed by name
    LoadOptions: Options accepted by load
    deep_merge, resolve_profile, camel_case: Building blocks used by load
    ConfigError, ConfigFileError, ConfigValidationError, ParserError: Exception types

Example:
    ```python
    import hot_config
    from hot_config import store

    # Loads ./config/**/*.yaml, picking the profile named by $APP_ENV
    hot_config.load_sync("config")
    store.get_path("db.mongo.host")

    # JSON files, explicit profile, without touching the store
    preview = hot_config.load_sync(
        "config",
        pattern=hot_config.PATTERNS["json"],
        parser="json",
        active_profile="production",
        dry_run=True,
    )
    ```
"""

import asyncio
from pathlib import Path
from typing import Any

from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import ConfigValidationError
from .exceptions import ParserError
from .loader import Callback
from .loader import Loader
from .manager import ConfigStore
from .manager import StoreManager
from .models import ConfigEntry
from .models import LoadOptions
from .parsers import PARSERS
from .parsers import PATTERNS
from .utils import camel_case
from .utils import deep_merge
from .utils import resolve_profile

__version__ = "0.1.0"

store = ConfigStore()
_manager = StoreManager(store)
_loader = Loader(_manager)


async def load(
    directory: str | Path,
    options: LoadOptions | dict[str, Any] | None = None,
    *,
    callback: Callback | None = None,
    **overrides: Any,
) -> Any:
    """Load a configuration directory into the process-wide store.

    See Loader.load for the arguments. Returns the store, or the dry-run tree
    when ``dry_run`` is set.
    """
    return await _loader.load(directory, options, callback=callback, **overrides)


def load_sync(
    directory: str | Path,
    options: LoadOptions | dict[str, Any] | None = None,
    *,
    callback: Callback | None = None,
    **overrides: Any,
) -> Any:
    """Blocking variant of load for code outside an event loop.

    Accepts the same ``callback`` as load.
    """
    return asyncio.run(_loader.load(directory, options, callback=callback, **overrides))


def clear() -> None:
    """Empty the process-wide store."""
    _manager.clear()


__all__ = [
    "store",
    "load",
    "load_sync",
    "clear",
    "PARSERS",
    "PATTERNS",
    "ConfigStore",
    "ConfigEntry",
    "LoadOptions",
    "Loader",
    "StoreManager",
    "deep_merge",
    "resolve_profile",
    "camel_case",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "ParserError",
]
