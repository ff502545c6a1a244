"""Language utilities for path aliases.

This module centralizes the language codes an alias can be stored under.
Keeping it in the domain layer allows actions, storages and the CLI to share
a single source of truth without creating circular imports with adapters.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# Alias applies regardless of language.
LANGCODE_NOT_SPECIFIED = "und"


class LanguageTag(BaseModel):
    """Value supplied for a `language` typed context parameter."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        max_length=12,
        description="Language code, e.g. 'en', 'es' or 'und'.",
    )
    name: str | None = Field(
        default=None,
        description="Human readable name, if known.",
    )

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.name or self.id
