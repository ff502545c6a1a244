"""Base class for rule actions.

An action is built with its configuration, id and definition, receives its
inputs as named context values and performs one side effect in `execute`.
The context layer only checks that a value exists and has the declared type;
everything else is left to the collaborators the action delegates to.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from core.domain.language import LanguageTag
from core.domain.models import ActionDefinition, ContextDefinition
from core.errors import ContextNotDefinedError, ContextTypeError, MissingContextValueError


_DATA_TYPES: dict[str, type] = {
    "string": str,
    "language": LanguageTag,
}


def _check_type(action_id: str, name: str, definition: ContextDefinition, value: Any) -> None:
    expected = _DATA_TYPES.get(definition.data_type)
    # Unregistered data types are passed through unchecked.
    if expected is not None and not isinstance(value, expected):
        raise ContextTypeError(action_id, name, definition.data_type, value)


class RulesActionBase:
    """Shared context plumbing for every action.

    Subclasses set `definition` and implement `execute`.
    """

    definition: ClassVar[ActionDefinition]

    def __init__(
        self,
        configuration: Mapping[str, Any] | None = None,
        plugin_id: str | None = None,
        plugin_definition: ActionDefinition | None = None,
    ) -> None:
        self.configuration: dict[str, Any] = dict(configuration or {})
        self.plugin_definition = plugin_definition or type(self).definition
        self.plugin_id = plugin_id or self.plugin_definition.id
        self._context_values: dict[str, Any] = {}

        for name, value in (self.configuration.get("context") or {}).items():
            self.set_context_value(name, value)

    def get_context_definitions(self) -> dict[str, ContextDefinition]:
        return dict(self.plugin_definition.context)

    def get_context_definition(self, name: str) -> ContextDefinition:
        try:
            return self.plugin_definition.context[name]
        except KeyError:
            raise ContextNotDefinedError(self.plugin_id, name) from None

    def set_context_value(self, name: str, value: Any) -> "RulesActionBase":
        definition = self.get_context_definition(name)
        if value is None:
            self._context_values.pop(name, None)
            return self
        _check_type(self.plugin_id, name, definition, value)
        self._context_values[name] = value
        return self

    def get_context_value(self, name: str) -> Any:
        definition = self.get_context_definition(name)
        if name in self._context_values:
            return self._context_values[name]
        if definition.required:
            raise MissingContextValueError(self.plugin_id, name)
        return None

    def summary(self) -> str:
        return self.plugin_definition.label

    def execute(self) -> None:
        raise NotImplementedError

    def execute_with(self, **values: Any) -> None:
        """Set the given context values, then execute."""

        for name, value in values.items():
            self.set_context_value(name, value)
        self.execute()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(plugin_id={self.plugin_id!r})"
