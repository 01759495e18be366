"""Process-scoped default store and the module-level merge/get calls."""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from configstore.errors import InvalidInputError
from configstore.result import MISSING
from configstore.store import ConfigStore

logger = logging.getLogger(__name__)

__all__ = ["get_default_store", "set_default_store", "merge", "get"]

_default_store = ConfigStore()
_default_lock = threading.Lock()


def get_default_store() -> ConfigStore:
    """Return the store used by the module-level :func:`merge` and :func:`get`."""
    with _default_lock:
        return _default_store


def set_default_store(store: ConfigStore) -> ConfigStore:
    """Install ``store`` as the process default and return the previous one.

    Raises:
        InvalidInputError: If ``store`` is not a ConfigStore.
    """
    global _default_store
    if not isinstance(store, ConfigStore):
        raise InvalidInputError(
            message=f"Default store must be a ConfigStore, got {type(store).__name__}"
        )
    with _default_lock:
        previous, _default_store = _default_store, store
    logger.debug("Default config store replaced")
    return previous


def merge(new_data: Mapping[str, Any]) -> None:
    """Shallow-merge ``new_data`` into the default store."""
    get_default_store().merge(new_data)


def get(*keys: Any, default: Any = MISSING) -> Any:
    """Look up a key path in the default store."""
    return get_default_store().get(*keys, default=default)
