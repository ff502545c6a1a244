from __future__ import annotations

import pytest

from core.actions.base import RulesActionBase
from core.actions.path_alias_create import PathAliasCreate
from core.actions.registry import ACTION_CLASSES, create_action, get_action_definitions
from core.domain.language import LanguageTag
from core.errors import ContextNotDefinedError, ContextTypeError, MissingContextValueError, UnknownActionError


def test_unknown_context_name(recording_storage):
    action = PathAliasCreate(None, None, None, recording_storage)

    with pytest.raises(ContextNotDefinedError):
        action.set_context_value("langcode", "en")
    with pytest.raises(ContextNotDefinedError):
        action.get_context_value("langcode")


def test_optional_context_defaults_to_none(recording_storage):
    action = PathAliasCreate(None, None, None, recording_storage)

    assert action.get_context_value("language") is None
    with pytest.raises(MissingContextValueError):
        action.get_context_value("source")


def test_language_must_be_a_language_tag(recording_storage):
    action = PathAliasCreate(None, None, None, recording_storage)

    with pytest.raises(ContextTypeError):
        action.set_context_value("language", "en")


def test_none_clears_a_value(recording_storage):
    action = PathAliasCreate(None, None, None, recording_storage)
    action.set_context_value("language", LanguageTag(id="de"))

    action.set_context_value("language", None)

    assert action.get_context_value("language") is None


def test_configuration_seeds_context(recording_storage):
    configuration = {"context": {"source": "node/9", "alias": "faq", "language": LanguageTag(id="it")}}
    action = PathAliasCreate(configuration, None, None, recording_storage)

    action.execute()

    assert recording_storage.calls == [("save", ("node/9", "faq", "it"))]


def test_base_execute_is_abstract():
    class Noop(RulesActionBase):
        definition = PathAliasCreate.definition

    with pytest.raises(NotImplementedError):
        Noop().execute()


def test_registry_lists_both_actions():
    assert set(ACTION_CLASSES) == {"rules_path_alias_create", "rules_path_aliases_delete"}
    assert [d.id for d in get_action_definitions()] == ["rules_path_alias_create", "rules_path_aliases_delete"]


def test_create_action_injects_storage(recording_storage):
    action = create_action("rules_path_aliases_delete", recording_storage, {"context": {"path": "node/3"}})

    action.execute()

    assert recording_storage.calls == [("delete", ({"path": "node/3"},))]


def test_create_action_unknown_id(recording_storage):
    with pytest.raises(UnknownActionError):
        create_action("rules_node_publish", recording_storage)


def test_definitions_serialize():
    payload = [d.model_dump(mode="json") for d in get_action_definitions()]

    create = payload[0]
    assert create["id"] == "rules_path_alias_create"
    assert create["context"]["language"] == {
        "data_type": "language",
        "label": "Language",
        "description": "If specified, the language for which the path alias applies.",
        "required": False,
    }
