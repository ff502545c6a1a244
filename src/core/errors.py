"""Error taxonomy.

Actions never raise or catch these themselves: the context layer and the
storages raise them, and only the CLI turns them into messages.
"""

from __future__ import annotations


class PathAliasError(Exception):
    """Base class for every error raised by this project."""


class ContextError(PathAliasError):
    """Problem with an action's context values."""


class ContextNotDefinedError(ContextError):
    def __init__(self, action_id: str, name: str) -> None:
        super().__init__(f"Action '{action_id}' has no context parameter '{name}'.")
        self.action_id = action_id
        self.name = name


class MissingContextValueError(ContextError):
    def __init__(self, action_id: str, name: str) -> None:
        super().__init__(f"Required context '{name}' of action '{action_id}' has no value.")
        self.action_id = action_id
        self.name = name


class ContextTypeError(ContextError):
    def __init__(self, action_id: str, name: str, data_type: str, value: object) -> None:
        super().__init__(
            f"Context '{name}' of action '{action_id}' expects a {data_type} value, "
            f"got {type(value).__name__}."
        )
        self.action_id = action_id
        self.name = name
        self.data_type = data_type


class InvalidContextValueError(ContextError):
    def __init__(self, name: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for context '{name}': {reason}")
        self.name = name
        self.value = value


class UnknownActionError(PathAliasError):
    def __init__(self, action_id: str) -> None:
        super().__init__(f"Unknown action '{action_id}'.")
        self.action_id = action_id


class StorageError(PathAliasError):
    """Failure inside an alias storage."""


class AliasConflictError(StorageError):
    def __init__(self, alias: str, langcode: str, existing_source: str) -> None:
        super().__init__(
            f"Alias '{alias}' ({langcode}) is already in use by '{existing_source}'."
        )
        self.alias = alias
        self.langcode = langcode
        self.existing_source = existing_source


class AliasNotFoundError(StorageError):
    def __init__(self, pid: int) -> None:
        super().__init__(f"No alias with pid {pid}.")
        self.pid = pid


class DuplicateAliasError(StorageError):
    def __init__(self, pid: int, existing_pid: int) -> None:
        super().__init__(f"Updating pid {pid} would duplicate alias pid {existing_pid}.")
        self.pid = pid
        self.existing_pid = existing_pid
