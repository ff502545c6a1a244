from __future__ import annotations

import pytest

from adapters.memory_alias_storage import MemoryAliasStorage
from core.domain.models import AliasRecord
from core.errors import AliasConflictError, AliasNotFoundError, DuplicateAliasError, StorageError


def test_save_assigns_increasing_pids(memory_storage):
    first = memory_storage.save("node/1", "about")
    second = memory_storage.save("node/2", "contact", "en")

    assert (first.pid, second.pid) == (1, 2)
    assert second == AliasRecord(pid=2, source="node/2", alias="contact", langcode="en")


def test_saving_identical_alias_twice_keeps_one_record(memory_storage):
    first = memory_storage.save("node/1", "about")
    again = memory_storage.save("node/1", "about")

    assert again == first
    assert len(memory_storage.list_aliases()) == 1


def test_same_alias_in_other_language_is_allowed(memory_storage):
    memory_storage.save("node/1", "about", "en")
    memory_storage.save("node/2", "about", "fr")

    assert memory_storage.lookup_path_source("about", "fr") == "node/2"


def test_alias_taken_by_other_source_conflicts(memory_storage):
    memory_storage.save("node/1", "about", "en")

    with pytest.raises(AliasConflictError) as excinfo:
        memory_storage.save("node/2", "about", "en")
    assert excinfo.value.existing_source == "node/1"


def test_update_by_pid(memory_storage):
    record = memory_storage.save("node/1", "about")

    updated = memory_storage.save("node/1", "about-us", pid=record.pid)

    assert updated.pid == record.pid
    assert memory_storage.list_aliases() == [updated]


def test_update_cannot_duplicate_another_record(memory_storage):
    memory_storage.save("node/1", "a")
    second = memory_storage.save("node/1", "b")

    with pytest.raises(DuplicateAliasError) as excinfo:
        memory_storage.save("node/1", "a", pid=second.pid)

    assert excinfo.value.existing_pid == 1
    assert [r.alias for r in memory_storage.list_aliases()] == ["a", "b"]


def test_update_unknown_pid(memory_storage):
    with pytest.raises(AliasNotFoundError):
        memory_storage.save("node/1", "about", pid=42)


def test_delete_counts_and_filters(memory_storage):
    memory_storage.save("node/1", "about", "en")
    memory_storage.save("node/1", "sobre", "es")
    memory_storage.save("node/2", "contact")

    assert memory_storage.delete({"path": "node/1", "langcode": "es"}) == 1
    assert memory_storage.delete({"alias": "missing"}) == 0
    assert memory_storage.delete({"source": "node/1"}) == 1
    assert [r.alias for r in memory_storage.list_aliases()] == ["contact"]


def test_delete_rejects_empty_or_unknown_filters(memory_storage):
    with pytest.raises(StorageError):
        memory_storage.delete({})
    with pytest.raises(StorageError):
        memory_storage.delete({"dst": "about"})
    with pytest.raises(StorageError):
        memory_storage.delete({"path": "node/1", "source": "node/2"})


def test_load_returns_first_match(memory_storage):
    memory_storage.save("node/1", "about", "en")
    memory_storage.save("node/1", "about-old", "en")

    assert memory_storage.load({"path": "node/1"}).alias == "about"
    assert memory_storage.load({"alias": "nothing"}) is None


def test_lookup_prefers_exact_language_then_newest(memory_storage):
    memory_storage.save("node/1", "generic", "und")
    memory_storage.save("node/1", "older-en", "en")
    memory_storage.save("node/1", "newer-en", "en")

    assert memory_storage.lookup_path_alias("node/1", "en") == "newer-en"
    assert memory_storage.lookup_path_alias("node/1", "de") == "generic"
    assert memory_storage.lookup_path_alias("node/9", "en") is None
    assert memory_storage.lookup_path_source("generic", "de") == "node/1"


def test_alias_exists(memory_storage):
    memory_storage.save("node/1", "about", "en")

    assert memory_storage.alias_exists("about", "en")
    assert not memory_storage.alias_exists("about", "fr")
    assert not memory_storage.alias_exists("about", "en", source="node/1")


def test_preloaded_records_continue_pid_sequence():
    storage = MemoryAliasStorage([AliasRecord(pid=7, source="node/7", alias="seven", langcode="und")])

    assert storage.save("node/8", "eight").pid == 8
