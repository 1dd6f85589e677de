"""Unit tests for skillteam.store."""

import json
from pathlib import Path
import tempfile

import pytest

from skillteam.store import DocumentNotFound, DocumentStore, StoreError


class TestDocumentStore:
    """Test DocumentStore read/write behaviour."""

    @pytest.fixture
    def data_dir(self):
        with tempfile.TemporaryDirectory() as d:
            yield Path(d)

    @pytest.fixture
    def store(self, data_dir):
        return DocumentStore(data_dir)

    def test_missing_collection_is_empty(self, store):
        assert store.list_all("Users") == []
        assert store.get("Users", "u1") is None

    def test_add_assigns_distinct_ids(self, store):
        id1 = store.add("Teams", {"name": "a"})
        id2 = store.add("Teams", {"name": "b"})
        assert id1 != id2
        assert store.get("Teams", id1) == {"name": "a"}
        assert [doc_id for doc_id, _ in store.list_all("Teams")] == [id1, id2]

    def test_get_returns_copy(self, store):
        store.set("Users", "u1", {"name": "A"})
        doc = store.get("Users", "u1")
        doc["name"] = "changed"
        assert store.get("Users", "u1") == {"name": "A"}

    def test_update_merges_fields(self, store):
        store.set("Teams", "t1", {"a": 1, "b": 2})
        store.update("Teams", "t1", {"b": 3, "c": 4})
        assert store.get("Teams", "t1") == {"a": 1, "b": 3, "c": 4}

    def test_update_missing_document_raises(self, store):
        with pytest.raises(DocumentNotFound):
            store.update("Teams", "nope", {"a": 1})

    def test_persists_across_instances(self, store, data_dir):
        store.set("Tags", "t1", {"name": "Python"})
        assert DocumentStore(data_dir).get("Tags", "t1") == {"name": "Python"}

    def test_no_temp_file_left_behind(self, store, data_dir):
        store.add("Teams", {"a": 1})
        assert not list(data_dir.glob("*.tmp"))

    def test_corrupt_file_raises_store_error(self, store, data_dir):
        (data_dir / "Users.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError, match="Users"):
            store.list_all("Users")

    def test_non_object_file_raises_store_error(self, store, data_dir):
        (data_dir / "Users.json").write_text(json.dumps([1, 2]), encoding="utf-8")
        with pytest.raises(StoreError):
            store.get("Users", "u1")

    def test_failed_write_keeps_previous_contents(self, store, data_dir):
        store.set("Teams", "t1", {"a": 1})
        with pytest.raises(StoreError, match="Failed to save"):
            store.add("Teams", {"bad": object()})
        assert store.list_all("Teams") == [("t1", {"a": 1})]
        assert not list(data_dir.glob("*.tmp"))
