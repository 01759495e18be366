"""Nested configuration store with shallow merge and path lookups."""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Mapping
from typing import Any, Sequence

from configstore.errors import ConfigKeyError, InvalidInputError
from configstore.result import MISSING, Lookup
from configstore.utils.path import get_in, normalize_path, split_dotted

logger = logging.getLogger(__name__)

__all__ = ["ConfigStore"]


class ConfigStore:
    """Holds a nested configuration mapping and resolves key paths into it.

    Data enters through :meth:`merge`, which replaces whole top-level values
    (no deep merge). Values handed in or out are deep-copied, so callers
    never share mutable state with the store.

    Thread safety:
        Internally synchronized. All public methods are safe to call
        concurrently.

    Example:
        store = ConfigStore()
        store.merge({"foo": {"bar": {"baz": 1}}})
        store.get("foo", "bar", "baz")    # 1
        store.get(["foo", "bar"])         # {"baz": 1}
        store.get("foo", "qux")           # MISSING
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        self._lock = threading.RLock()
        if data is not None:
            self.merge(data)

    # ----- Mutation -----

    def merge(self, new_data: Mapping[str, Any]) -> None:
        """Merge ``new_data`` into the store, top level only.

        Each top-level key of ``new_data`` replaces any existing value for
        that key. Keys already stored but absent from ``new_data`` are kept.

        Raises:
            InvalidInputError: If ``new_data`` is not a mapping.
        """
        if not isinstance(new_data, Mapping):
            raise InvalidInputError(
                message=f"Config data must be a mapping, got {type(new_data).__name__}"
            )
        incoming = copy.deepcopy(dict(new_data))
        with self._lock:
            self._data.update(incoming)
        logger.debug("Merged config keys: %s", sorted(map(str, incoming)))

    def clear(self) -> None:
        """Drop all stored configuration."""
        with self._lock:
            self._data.clear()
        logger.debug("Config store cleared")

    # ----- Lookup -----

    def lookup(self, path: Sequence[Any]) -> Lookup:
        """Resolve ``path`` and report whether it was found.

        An empty path always resolves to the whole tree. A string is treated
        as a single key.
        """
        if isinstance(path, str):
            path = (path,)
        path = tuple(path)
        with self._lock:
            try:
                node = get_in(self._data, path)
            except ConfigKeyError as e:
                logger.debug("Config lookup missed: %s", e.message)
                return Lookup.miss()
            return Lookup.hit(copy.deepcopy(node))

    def get(self, *keys: Any, default: Any = MISSING) -> Any:
        """Return the value at the given key path.

        Keys may be passed individually or as a single list/tuple; both forms
        are equivalent. With no keys the whole tree is returned.

        Returns:
            The resolved value, or ``default`` (``MISSING`` unless given) if
            the path does not resolve.
        """
        return self.lookup(normalize_path(keys)).unwrap_or(default)

    def get_dotted(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key, e.g. ``"db.pool.size"``."""
        return self.lookup(split_dotted(key)).unwrap_or(default)

    def require(self, *keys: Any) -> Any:
        """Like :meth:`get`, but raise instead of returning a sentinel.

        Raises:
            ConfigKeyError: If the path does not resolve.
        """
        path = normalize_path(keys)
        result = self.lookup(path)
        if not result.found:
            raise ConfigKeyError(path)
        return result.value

    def has(self, *keys: Any) -> bool:
        """Whether the key path resolves, even to a falsy value."""
        return self.lookup(normalize_path(keys)).found

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the whole tree."""
        with self._lock:
            return copy.deepcopy(self._data)

    # ----- Dunder helpers -----

    def __contains__(self, key: object) -> bool:
        with self._lock:
            try:
                return key in self._data
            except TypeError:
                return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        with self._lock:
            keys = list(self._data)
        return f"ConfigStore(keys={keys!r})"
