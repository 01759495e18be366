"""Tests for the process default store and module-level merge/get."""

from __future__ import annotations

import pytest

import configstore
from configstore import MISSING, ConfigStore, InvalidInputError


class TestModuleLevelApi:
    def test_merge_then_get(self) -> None:
        configstore.merge({"foo": {"bar": {"baz": 1}}})
        assert configstore.get("foo", "bar", "baz") == 1
        assert configstore.get(["foo", "bar"]) == {"baz": 1}
        assert configstore.get("foo", "qux") is MISSING
        assert configstore.get() == {"foo": {"bar": {"baz": 1}}}

    def test_merges_accumulate(self) -> None:
        configstore.merge({"a": 1})
        configstore.merge({"b": 2})
        configstore.merge({"a": 3})
        assert configstore.get() == {"a": 3, "b": 2}

    def test_get_default(self) -> None:
        assert configstore.get("nope", default="fallback") == "fallback"

    def test_empty_by_default(self) -> None:
        assert configstore.get() == {}


class TestDefaultStoreSwap:
    def test_module_calls_use_current_default(self, isolated_default_store: ConfigStore) -> None:
        configstore.merge({"x": 1})
        assert isolated_default_store.get("x") == 1
        assert configstore.get_default_store() is isolated_default_store

    def test_set_returns_previous(self, isolated_default_store: ConfigStore) -> None:
        replacement = ConfigStore({"y": 2})
        previous = configstore.set_default_store(replacement)
        assert previous is isolated_default_store
        assert configstore.get("y") == 2
        configstore.set_default_store(previous)

    def test_rejects_non_store(self) -> None:
        with pytest.raises(InvalidInputError):
            configstore.set_default_store({"a": 1})  # type: ignore[arg-type]
