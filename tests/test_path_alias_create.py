from __future__ import annotations

import pytest

from core.actions.path_alias_create import ALIAS_STORAGE_SERVICE, PathAliasCreate
from core.domain.language import LanguageTag
from core.errors import AliasConflictError, MissingContextValueError
from core.interfaces.alias_storage import AliasStorage


def _action(storage) -> PathAliasCreate:
    return PathAliasCreate(None, None, None, storage)


def test_no_language_saves_with_not_specified_code(recording_storage):
    _action(recording_storage).execute_with(source="node/28", alias="about")

    assert recording_storage.calls == [("save", ("node/28", "about", "und"))]


def test_language_code_is_passed_unchanged(recording_storage):
    _action(recording_storage).execute_with(source="node/28", alias="a-propos", language=LanguageTag(id="fr"))

    assert recording_storage.calls == [("save", ("node/28", "a-propos", "fr"))]


@pytest.mark.parametrize(
    ("source", "alias"),
    [
        (" node/1 ", "About/"),
        ("/node/2", "/ÜBER uns"),
        ("taxonomy/term/1+2", "tags//mixed CASE"),
    ],
)
def test_source_and_alias_pass_through_untouched(recording_storage, source, alias):
    _action(recording_storage).execute_with(source=source, alias=alias)

    assert recording_storage.calls == [("save", (source, alias, "und"))]


def test_storage_failure_reaches_caller(failing_storage):
    with pytest.raises(RuntimeError, match="database is locked"):
        _action(failing_storage).execute_with(source="node/28", alias="about")
    assert len(failing_storage.calls) == 1


def test_conflict_from_real_storage_propagates(memory_storage):
    memory_storage.save("node/1", "about", "und")

    with pytest.raises(AliasConflictError):
        _action(memory_storage).execute_with(source="node/2", alias="about")


def test_missing_alias_never_reaches_storage(recording_storage):
    action = _action(recording_storage)
    action.set_context_value("source", "node/28")

    with pytest.raises(MissingContextValueError):
        action.execute()
    assert recording_storage.calls == []


def test_create_pulls_storage_from_services(recording_storage):
    action = PathAliasCreate.create({ALIAS_STORAGE_SERVICE: recording_storage}, {"context": {"source": "node/5", "alias": "team"}})

    action.execute()

    assert action.alias_storage is recording_storage
    assert action.plugin_id == "rules_path_alias_create"
    assert recording_storage.calls == [("save", ("node/5", "team", "und"))]


def test_build_request_keeps_missing_language_as_none(recording_storage):
    action = _action(recording_storage)
    action.execute_with(source="node/28", alias="about")

    request = action.build_request()
    assert request.source_path == "node/28"
    assert request.alias == "about"
    assert request.language_code is None


def test_definition_schema():
    definition = PathAliasCreate.definition

    assert definition.id == "rules_path_alias_create"
    assert definition.label == "Create any path alias"
    assert list(definition.context) == ["source", "alias", "language"]
    assert definition.context["source"].data_type == "string"
    assert definition.context["source"].label == "Existing system path"
    assert definition.context["alias"].label == "Path alias"
    assert definition.context["language"].data_type == "language"
    assert definition.context["language"].required is False


def test_summary(recording_storage):
    assert _action(recording_storage).summary() == "Create any path alias"


def test_fakes_satisfy_protocol(recording_storage, memory_storage):
    assert isinstance(recording_storage, AliasStorage)
    assert isinstance(memory_storage, AliasStorage)
