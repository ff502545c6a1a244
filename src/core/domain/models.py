"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-describing fields (Field) without coupling the
  Core to any storage library.
- Action definitions serialize as-is for a host engine (`model_dump`).

Note:
- These models describe *what* an alias is, not *how* it is stored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PathAliasRequest(BaseModel):
    """Parameters extracted from an action's context for a single call."""

    source_path: str = Field(
        ...,
        description="Existing system path, e.g. 'node/28'.",
    )
    alias: str = Field(
        ...,
        description="Alternative path by which the source can be accessed.",
    )
    language_code: str | None = Field(
        default=None,
        description="Language the alias applies to; None means not specified.",
    )


class AliasRecord(BaseModel):
    """An alias as held by a storage.

    The storage owns this record: it assigns `pid` and decides uniqueness.
    """

    model_config = ConfigDict(frozen=True)

    pid: int = Field(
        ...,
        ge=1,
        description="Storage assigned identifier.",
    )
    source: str = Field(
        ...,
        description="Internal system path being aliased.",
    )
    alias: str = Field(
        ...,
        description="Human friendly path.",
    )
    langcode: str = Field(
        ...,
        min_length=1,
        description="Language code of the alias ('und' when not specified).",
    )


class ContextDefinition(BaseModel):
    """Declarative description of one action parameter.

    Consumed by the host (UI/validation); actions only read their values.
    """

    model_config = ConfigDict(frozen=True)

    data_type: str = Field(
        ...,
        min_length=1,
        description="Type name of the value ('string', 'language', ...).",
    )
    label: str = Field(
        ...,
        min_length=1,
        description="Short human readable label.",
    )
    description: str | None = Field(
        default=None,
        description="Help text shown next to the parameter.",
    )
    required: bool = Field(
        default=True,
        description="Whether the host must supply a value.",
    )


class ActionDefinition(BaseModel):
    """Registration metadata of a rule action: its whole contract with a host."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Stable identifier, e.g. 'rules_path_alias_create'.",
    )
    label: str = Field(
        ...,
        min_length=1,
        description="Human readable name of the action.",
    )
    context: dict[str, ContextDefinition] = Field(
        default_factory=dict,
        description="Parameters by name, in declaration order.",
    )
