"""JSON file alias storage.

Why JSON:
- Human readable, diffable state for small sites and local experiments.
- No database needed to try the actions from the CLI.

Format: `{"next_pid": n, "aliases": [{pid, source, alias, langcode}, ...]}`,
UTF-8, sorted keys. The whole document is rewritten through a temporary file
after each mutation, so concurrent writers are not supported.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from adapters.memory_alias_storage import MemoryAliasStorage
from core.domain.models import AliasRecord
from core.errors import StorageError


class JsonAliasStorage(MemoryAliasStorage):
    backend = "json"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        records, next_pid = _read_document(self.path)
        super().__init__(records, next_pid=next_pid)

    def _changed(self) -> None:
        payload = {
            "next_pid": self._next_pid,
            "aliases": [record.model_dump(mode="json") for record in self.list_aliases()],
        }
        text = json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"Could not write alias file {self.path}: {exc}") from exc


def _read_document(path: Path) -> tuple[list[AliasRecord], int]:
    if not path.exists():
        return [], 1

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise StorageError(f"Alias file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise StorageError(f"Alias file {path} must contain a JSON object.")

    raw_aliases = data.get("aliases", [])
    if not isinstance(raw_aliases, list):
        raise StorageError(f"Alias file {path}: 'aliases' must be a list.")

    try:
        records = [AliasRecord.model_validate(item) for item in raw_aliases]
    except ValidationError as exc:
        raise StorageError(f"Alias file {path} holds an invalid alias: {exc}") from exc

    next_pid = data.get("next_pid", 1)
    if not isinstance(next_pid, int) or next_pid < 1:
        raise StorageError(f"Alias file {path}: 'next_pid' must be a positive integer.")
    return records, next_pid
