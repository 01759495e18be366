"""Shared fixtures for the configstore test suite."""

from __future__ import annotations

from typing import Any, Iterator

import pytest

from configstore import ConfigStore, set_default_store


@pytest.fixture
def store() -> ConfigStore:
    """A fresh, empty store."""
    return ConfigStore()


@pytest.fixture
def nested_data() -> dict[str, Any]:
    """The three-level tree used throughout the lookup tests."""
    return {"foo": {"bar": {"baz": 1}}}


@pytest.fixture
def loaded_store(nested_data: dict[str, Any]) -> ConfigStore:
    """A store seeded with ``nested_data``."""
    return ConfigStore(nested_data)


@pytest.fixture(autouse=True)
def isolated_default_store() -> Iterator[ConfigStore]:
    """Give every test its own process default store."""
    fresh = ConfigStore()
    previous = set_default_store(fresh)
    yield fresh
    set_default_store(previous)
