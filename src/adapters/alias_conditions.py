"""Filter and lookup rules shared by every alias storage.

A filter is a mapping such as `{"path": "node/1"}` or
`{"alias": "about", "langcode": "en"}`. `path` is the historical name of the
`source` column and both spellings are accepted.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from core.domain.language import LANGCODE_NOT_SPECIFIED
from core.domain.models import AliasRecord
from core.errors import StorageError


CONDITION_FIELDS: dict[str, str] = {
    "path": "source",
    "source": "source",
    "alias": "alias",
    "langcode": "langcode",
    "pid": "pid",
}


def normalize_conditions(conditions: Mapping[str, Any]) -> dict[str, Any]:
    """Map filter keys to record fields.

    An empty filter would match every alias and is rejected.
    """

    if not conditions:
        raise StorageError("Refusing an empty alias filter.")

    fields: dict[str, Any] = {}
    for key, value in conditions.items():
        field = CONDITION_FIELDS.get(key)
        if field is None:
            raise StorageError(f"Unknown alias filter key '{key}'.")
        if field in fields and fields[field] != value:
            raise StorageError(f"Conflicting values for alias filter field '{field}'.")
        fields[field] = value
    return fields


def record_matches(record: AliasRecord, fields: Mapping[str, Any]) -> bool:
    return all(getattr(record, field) == value for field, value in fields.items())


def preferred_record(records: Iterable[AliasRecord], langcode: str) -> AliasRecord | None:
    """Pick the record to use for `langcode`.

    Exact language beats 'not specified'; among equals the newest pid wins.
    """

    accepted = {langcode, LANGCODE_NOT_SPECIFIED}
    candidates = [r for r in records if r.langcode in accepted]
    if not candidates:
        return None
    return min(candidates, key=lambda r: (r.langcode != langcode, -r.pid))
