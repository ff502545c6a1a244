"""Action: create any path alias.

Pulls `source`, `alias` and the optional `language` from the context and
hands them to the alias storage's `save`. The result of `save` is ignored and
any error it raises reaches the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from core.actions.base import RulesActionBase
from core.domain.language import LANGCODE_NOT_SPECIFIED
from core.domain.models import ActionDefinition, ContextDefinition, PathAliasRequest
from core.interfaces.alias_storage import AliasStorage


logger = logging.getLogger(__name__)

ALIAS_STORAGE_SERVICE = "path.alias_storage"


class PathAliasCreate(RulesActionBase):
    """Provides a 'Create any path alias' action."""

    definition = ActionDefinition(
        id="rules_path_alias_create",
        label="Create any path alias",
        context={
            "source": ContextDefinition(
                data_type="string",
                label="Existing system path",
                description=(
                    "Specifies the existing path you wish to alias. "
                    "For example: node/28, forum/1, taxonomy/term/1+2."
                ),
            ),
            "alias": ContextDefinition(
                data_type="string",
                label="Path alias",
                description=(
                    "Specify an alternative path by which this data can be accessed. "
                    "For example, 'about' for an about page. "
                    "Use a relative path and do not add a trailing slash."
                ),
            ),
            "language": ContextDefinition(
                data_type="language",
                label="Language",
                description="If specified, the language for which the path alias applies.",
                required=False,
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
    ) -> "PathAliasCreate":
        return cls(configuration, plugin_id, plugin_definition, services[ALIAS_STORAGE_SERVICE])

    def build_request(self) -> PathAliasRequest:
        language = self.get_context_value("language")
        return PathAliasRequest(
            source_path=self.get_context_value("source"),
            alias=self.get_context_value("alias"),
            language_code=language.id if language is not None else None,
        )

    def execute(self) -> None:
        request = self.build_request()
        langcode = request.language_code or LANGCODE_NOT_SPECIFIED
        logger.debug(
            "Saving path alias",
            extra={
                "action_id": self.plugin_id,
                "source": request.source_path,
                "alias": request.alias,
                "langcode": langcode,
            },
        )
        self.alias_storage.save(request.source_path, request.alias, langcode)
