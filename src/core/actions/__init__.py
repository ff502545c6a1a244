"""Rule actions operating on path aliases.

Why a package:
- Groups the action base class, the concrete actions and their registry.
- Each action depends only on `core.interfaces.alias_storage.AliasStorage`.
"""

from core.actions.base import RulesActionBase
from core.actions.path_alias_create import PathAliasCreate
from core.actions.path_alias_delete import PathAliasDelete
from core.actions.registry import (
    ACTION_CLASSES,
    create_action,
    get_action_class,
    get_action_definitions,
)

__all__ = [
	"ACTION_CLASSES",
	"PathAliasCreate",
	"PathAliasDelete",
	"RulesActionBase",
	"create_action",
	"get_action_class",
	"get_action_definitions",
]
