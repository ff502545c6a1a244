"""In-memory alias storage.

Process local, no persistence. Used by tests and as the base of the JSON
file storage, which only adds loading and writing the document.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from adapters.alias_conditions import normalize_conditions, preferred_record, record_matches
from core.domain.language import LANGCODE_NOT_SPECIFIED
from core.domain.models import AliasRecord
from core.errors import AliasConflictError, AliasNotFoundError, DuplicateAliasError


logger = logging.getLogger(__name__)


class MemoryAliasStorage:
    """Dict backed implementation of `core.interfaces.alias_storage.AliasStorage`."""

    backend = "memory"

    def __init__(self, records: Iterable[AliasRecord] = (), *, next_pid: int = 1) -> None:
        self._records: dict[int, AliasRecord] = {}
        self._next_pid = next_pid
        for record in records:
            self._records[record.pid] = record
            self._next_pid = max(self._next_pid, record.pid + 1)

    def _changed(self) -> None:
        """Hook called after every mutation."""

    def _commit(self, records: dict[int, AliasRecord], next_pid: int) -> None:
        # State only changes once `_changed` succeeded.
        previous = self._records, self._next_pid
        self._records, self._next_pid = records, next_pid
        try:
            self._changed()
        except Exception:
            self._records, self._next_pid = previous
            raise

    def _find_identical(self, source: str, alias: str, langcode: str, pid: int | None) -> AliasRecord | None:
        for record in self._records.values():
            if record.pid != pid and (record.source, record.alias, record.langcode) == (source, alias, langcode):
                return record
        return None

    def _find_conflict(self, alias: str, langcode: str, source: str, pid: int | None) -> AliasRecord | None:
        for record in self._records.values():
            if record.pid == pid:
                continue
            if record.alias == alias and record.langcode == langcode and record.source != source:
                return record
        return None

    def save(
        self,
        source: str,
        alias: str,
        langcode: str = LANGCODE_NOT_SPECIFIED,
        pid: int | None = None,
    ) -> AliasRecord:
        if pid is not None and pid not in self._records:
            raise AliasNotFoundError(pid)

        conflict = self._find_conflict(alias, langcode, source, pid)
        if conflict is not None:
            raise AliasConflictError(alias, langcode, conflict.source)

        identical = self._find_identical(source, alias, langcode, pid)
        next_pid = self._next_pid
        if pid is None:
            if identical is not None:
                return identical
            pid = next_pid
            next_pid += 1
            op = "insert"
        else:
            if identical is not None:
                raise DuplicateAliasError(pid, identical.pid)
            op = "update"

        record = AliasRecord(pid=pid, source=source, alias=alias, langcode=langcode)
        self._commit({**self._records, pid: record}, next_pid)
        logger.info(
            "Alias %s",
            op,
            extra={"backend": self.backend, "pid": pid, "source": source, "alias": alias, "langcode": langcode},
        )
        return record

    def delete(self, conditions: Mapping[str, Any]) -> int:
        fields = normalize_conditions(conditions)
        doomed = [pid for pid, record in self._records.items() if record_matches(record, fields)]
        if doomed:
            kept = {pid: record for pid, record in self._records.items() if pid not in doomed}
            self._commit(kept, self._next_pid)
        logger.info("Deleted %d alias(es)", len(doomed), extra={"backend": self.backend, **_log_fields(fields)})
        return len(doomed)

    def load(self, conditions: Mapping[str, Any]) -> AliasRecord | None:
        fields = normalize_conditions(conditions)
        for record in self.list_aliases():
            if record_matches(record, fields):
                return record
        return None

    def lookup_path_alias(self, path: str, langcode: str) -> str | None:
        record = preferred_record((r for r in self._records.values() if r.source == path), langcode)
        return record.alias if record else None

    def lookup_path_source(self, alias: str, langcode: str) -> str | None:
        record = preferred_record((r for r in self._records.values() if r.alias == alias), langcode)
        return record.source if record else None

    def alias_exists(self, alias: str, langcode: str, source: str | None = None) -> bool:
        for record in self._records.values():
            if record.alias != alias or record.langcode != langcode:
                continue
            if source is not None and record.source == source:
                continue
            return True
        return False

    def list_aliases(self) -> list[AliasRecord]:
        return [self._records[pid] for pid in sorted(self._records)]


def _log_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    # `source` filters are reported as `path`, the name callers use.
    out = dict(fields)
    if "source" in out:
        out["path"] = out.pop("source")
    return out
