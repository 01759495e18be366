"""Key path helpers for descending into nested mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from configstore.errors import ConfigKeyError

__all__ = ["get_in", "normalize_path", "split_dotted"]


def get_in(tree: Any, path: Sequence[Any]) -> Any:
    """Descend into ``tree`` following ``path`` one key at a time.

    Args:
        tree: The root node. Only mappings can be descended into.
        path: Ordered keys, outermost first. An empty path yields ``tree``.

    Returns:
        The node found at the end of the path, without copying.

    Raises:
        ConfigKeyError: If a node along the way is not a mapping, or the key
            is absent or unhashable.
    """
    current = tree
    for depth, key in enumerate(path):
        if not isinstance(current, Mapping):
            raise ConfigKeyError(path[: depth + 1])
        try:
            current = current[key]
        except (KeyError, TypeError) as e:
            raise ConfigKeyError(path[: depth + 1], cause=e) from e
    return current


def normalize_path(keys: tuple[Any, ...]) -> tuple[Any, ...]:
    """Collapse variadic call arguments into a single key path.

    ``("a", "b")`` and ``(["a", "b"],)`` both become ``("a", "b")``. Strings
    are always single keys.
    """
    if len(keys) == 1 and isinstance(keys[0], (list, tuple)):
        return tuple(keys[0])
    return keys


def split_dotted(key: str) -> tuple[str, ...]:
    """Split a dot-path key like ``"db.pool.size"`` into its parts."""
    if not key:
        return ()
    return tuple(key.split("."))
