"""Action: delete alias for a path.

Filters on `path` only, so every alias of that source path is removed, in
every language.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from core.actions.base import RulesActionBase
from core.actions.path_alias_create import ALIAS_STORAGE_SERVICE
from core.domain.models import ActionDefinition, ContextDefinition
from core.interfaces.alias_storage import AliasStorage


logger = logging.getLogger(__name__)


class PathAliasDelete(RulesActionBase):
    """Provides a 'Delete alias for a path' action."""

    definition = ActionDefinition(
        id="rules_path_aliases_delete",
        label="Delete alias for a path",
        context={
            "path": ContextDefinition(
                data_type="string",
                label="Existing system path",
                description=(
                    "Specifies the existing path you wish to delete the alias of, "
                    "for example 'node/1'. "
                    "Use a relative path and do not add a trailing slash."
                ),
            ),
        },
    )

    def __init__(
        self,
        configuration: Mapping[str, Any] | None,
        plugin_id: str | None,
        plugin_definition: ActionDefinition | None,
        alias_storage: AliasStorage,
    ) -> None:
        super().__init__(configuration, plugin_id, plugin_definition)
        self.alias_storage = alias_storage

    @classmethod
    def create(
        cls,
        services: Mapping[str, Any],
        configuration: Mapping[str, Any] | None = None,
        plugin_id: str | None = None,
        plugin_definition: ActionDefinition | None = None,
    ) -> "PathAliasDelete":
        return cls(configuration, plugin_id, plugin_definition, services[ALIAS_STORAGE_SERVICE])

    def execute(self) -> None:
        path = self.get_context_value("path")
        logger.debug("Deleting path aliases", extra={"action_id": self.plugin_id, "path": path})
        self.alias_storage.delete({"path": path})
