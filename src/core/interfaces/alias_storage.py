"""Alias storage contract.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- Storages (memory, JSON file, SQL, a host CMS) stay interchangeable and
  actions can be tested against a recording fake.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class AliasStorage(Protocol):
    """The two-method surface the path alias actions depend on.

    Design rules:
    - Both calls are synchronous; the storage may block (e.g. a DB write).
    - Failures are raised, never returned; callers do not translate them.
    """

    def save(self, source: str, alias: str, langcode: str) -> Any:
        """Store `alias` for `source` under `langcode`."""

        ...

    def delete(self, conditions: Mapping[str, Any]) -> Any:
        """Remove every alias matching all `conditions` (e.g. `{"path": ...}`)."""

        ...
