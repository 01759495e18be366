"""configstore - Process-wide nested configuration store."""

from __future__ import annotations

# Core
from configstore.store import ConfigStore
from configstore.result import MISSING, Lookup

# Default store
from configstore.defaults import get, get_default_store, merge, set_default_store

# Errors
from configstore.errors import (
    ConfigKeyError,
    ConfigStoreError,
    ErrorCodes,
    InvalidInputError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigStore",
    "Lookup",
    "MISSING",
    # Default store
    "merge",
    "get",
    "get_default_store",
    "set_default_store",
    # Errors
    "ErrorCodes",
    "ConfigStoreError",
    "ConfigKeyError",
    "InvalidInputError",
]
