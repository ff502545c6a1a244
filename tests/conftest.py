from __future__ import annotations

import logging
import os
from typing import Any, Mapping

import pytest

from adapters.memory_alias_storage import MemoryAliasStorage


class RecordingAliasStorage:
    """Fake storage that records every call and can be told to fail."""

    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.error = error

    def save(self, source: str, alias: str, langcode: str) -> Any:
        self.calls.append(("save", (source, alias, langcode)))
        if self.error is not None:
            raise self.error
        return {"source": source, "alias": alias, "langcode": langcode}

    def delete(self, conditions: Mapping[str, Any]) -> Any:
        self.calls.append(("delete", (dict(conditions),)))
        if self.error is not None:
            raise self.error
        return 0


@pytest.fixture
def recording_storage() -> RecordingAliasStorage:
    return RecordingAliasStorage()


@pytest.fixture
def memory_storage() -> MemoryAliasStorage:
    return MemoryAliasStorage()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run with a clean working dir and no PATH_ALIAS_RULES_* variables."""

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("PATH_ALIAS_RULES_"):
            monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def failing_storage() -> RecordingAliasStorage:
    return RecordingAliasStorage(error=RuntimeError("database is locked"))


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI callback replaces root handlers; put pytest's back afterwards."""

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
