"""Process-wide configuration store and its commit logic."""

import copy
import logging
import threading
from collections.abc import Iterable
from collections.abc import ItemsView
from collections.abc import Iterator
from collections.abc import KeysView
from collections.abc import MutableMapping
from collections.abc import ValuesView
from typing import Any

from .models import ConfigEntry
from .utils import set_path

logger = logging.getLogger(__name__)

_MISSING = object()


class ConfigStore(MutableMapping[str, Any]):
    """Mutable mapping holding the loaded configuration tree.

    The store object itself is never replaced: reloads swap its contents,
    so references taken before a reload observe the new values. The swap is
    a single reference assignment, so readers see either the previous tree
    or the new one in full.

    Example:
        >>> store = ConfigStore()
        >>> store._replace({"db": {"mongo": {"host": "localhost"}}})
        >>> store.get_path("db.mongo.host")
        'localhost'
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigStore({self._data!r})"

    # Views bind to the tree current at call time, so iterating one never
    # straddles a reload.
    def keys(self) -> KeysView[str]:
        return self._data.keys()

    def items(self) -> ItemsView[str, Any]:
        return self._data.items()

    def values(self) -> ValuesView[Any]:
        return self._data.values()

    def get_path(self, dotted: str, default: Any = None) -> Any:
        """Look up a value by dotted key path.

        Args:
            dotted: Path such as ``"db.mongo.host"``
            default: Returned when any segment is missing

        Returns:
            Value at the path or default
        """
        node: Any = self._data
        for name in dotted.split("."):
            if not isinstance(node, dict):
                return default
            node = node.get(name, _MISSING)
            if node is _MISSING:
                return default
        return node

    def snapshot(self) -> dict[str, Any]:
        """Return a deep copy of the current tree."""
        return copy.deepcopy(self._data)

    def _replace(self, tree: dict[str, Any]) -> None:
        self._data = tree


def apply_batch(entries: Iterable[ConfigEntry], target: dict[str, Any]) -> dict[str, Any]:
    """Assign each entry's value at its key path in target.

    Later entries win when paths collide; siblings under a replaced key are
    not merged.

    Args:
        entries: Entries in discovery order
        target: Tree to populate (modified in place)

    Returns:
        The target tree
    """
    for entry in entries:
        set_path(target, entry.path, entry.value)
    return target


class StoreManager:
    """Owns the store and serializes every mutation of it."""

    def __init__(self, store: ConfigStore):
        self.store = store
        self._lock = threading.Lock()

    def commit(self, entries: list[ConfigEntry]) -> ConfigStore:
        """Replace the store contents with the given entries.

        The new tree is built off to the side and swapped in under the
        commit lock. Concurrent commits therefore never interleave.

        Returns:
            The store
        """
        tree = apply_batch(entries, {})
        with self._lock:
            self.store._replace(tree)
        logger.info(f"Committed {len(entries)} configuration entries to store")
        return self.store

    def dry_run(self, entries: list[ConfigEntry]) -> dict[str, Any]:
        """Build the tree a commit would produce without touching the store."""
        return apply_batch(entries, {})

    def clear(self) -> None:
        """Remove every top-level key from the store."""
        logger.warning("Clearing configuration store")
        with self._lock:
            self.store._replace({})
