"""Alias storages (concrete implementations of `AliasStorage`).

Why a package:
- Groups one module per backend (memory, JSON file, SQL).
- Each module implements `core.interfaces.alias_storage.AliasStorage`.
"""

from adapters.json_alias_storage import JsonAliasStorage
from adapters.memory_alias_storage import MemoryAliasStorage
from adapters.sql_alias_storage import SqlAliasStorage
from adapters.storage_factory import build_alias_storage

__all__ = [
	"JsonAliasStorage",
	"MemoryAliasStorage",
	"SqlAliasStorage",
	"build_alias_storage",
]
