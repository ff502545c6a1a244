"""Explicit action registry.

The composition root (CLI, a host engine) looks actions up by id here and
injects the alias storage itself; there is no discovery and no global
service container.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.actions.base import RulesActionBase
from core.actions.path_alias_create import PathAliasCreate
from core.actions.path_alias_delete import PathAliasDelete
from core.domain.models import ActionDefinition
from core.errors import UnknownActionError
from core.interfaces.alias_storage import AliasStorage


ACTION_CLASSES: dict[str, type[RulesActionBase]] = {
    PathAliasCreate.definition.id: PathAliasCreate,
    PathAliasDelete.definition.id: PathAliasDelete,
}


def get_action_class(action_id: str) -> type[RulesActionBase]:
    try:
        return ACTION_CLASSES[action_id]
    except KeyError:
        raise UnknownActionError(action_id) from None


def get_action_definitions() -> list[ActionDefinition]:
    """Definitions of every registered action, sorted by id."""

    return [ACTION_CLASSES[action_id].definition for action_id in sorted(ACTION_CLASSES)]


def create_action(
    action_id: str,
    alias_storage: AliasStorage,
    configuration: Mapping[str, Any] | None = None,
) -> RulesActionBase:
    action_class = get_action_class(action_id)
    return action_class(configuration, action_id, action_class.definition, alias_storage)  # type: ignore[call-arg]
