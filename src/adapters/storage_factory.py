"""Alias storage selection.

The composition root calls `build_alias_storage` once and injects the result
into every action it creates.
"""

from __future__ import annotations

from adapters.json_alias_storage import JsonAliasStorage
from adapters.memory_alias_storage import MemoryAliasStorage
from adapters.sql_alias_storage import SqlAliasStorage
from core.config import AppSettings


AliasStorageBackend = MemoryAliasStorage | SqlAliasStorage


def build_alias_storage(settings: AppSettings | None = None) -> AliasStorageBackend:
    settings = settings or AppSettings()
    if settings.storage_backend == "memory":
        return MemoryAliasStorage()
    if settings.storage_backend == "sql":
        return SqlAliasStorage(settings.database_url)
    return JsonAliasStorage(settings.storage_path)
