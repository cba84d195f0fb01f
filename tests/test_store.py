import json

import pytest

from components.base.exceptions import ProcessingError
from components.complaints import JsonRecordStore


class TestJsonRecordStore:
    def test_initialize_creates_collections(self, store):
        path = store.data_dir / "complaints.json"
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == []
        assert sorted(p.name for p in store.data_dir.glob("*.json")) == ["complaints.json"]

    def test_initialize_keeps_existing_records(self, store):
        store.insert("complaints", {"description": "first"})
        store.initialize()
        assert len(store.get_all("complaints")) == 1

    def test_insert_assigns_sequential_ids(self, store):
        first = store.insert("complaints", {"description": "first"})
        second = store.insert("complaints", {"description": "second"})

        assert first["id"] == 1
        assert second["id"] == 2
        assert first["created_at"]
        assert [r["id"] for r in store.get_all("complaints")] == [1, 2]

    def test_insert_ignores_caller_id(self, store):
        record = store.insert("complaints", {"id": 42, "description": "first"})
        assert record["id"] == 1

    def test_ids_follow_the_highest(self, store):
        store.insert("complaints", {"description": "first"})
        store.insert("complaints", {"description": "second"})
        store.delete_by_id("complaints", 1)
        assert store.insert("complaints", {"description": "third"})["id"] == 3

    def test_find(self, store):
        store.insert("complaints", {"description": "a", "status": "submitted"})
        store.insert("complaints", {"description": "b", "status": "resolved"})
        store.insert("complaints", {"description": "c", "status": "submitted"})

        submitted = store.find("complaints", {"status": "submitted"})
        assert [r["description"] for r in submitted] == ["a", "c"]

        by_predicate = store.find("complaints", lambda r: r["description"] in ("b", "c"))
        assert [r["id"] for r in by_predicate] == [2, 3]

        assert store.find_one("complaints", {"status": "resolved"})["id"] == 2
        assert store.find_one("complaints", {"status": "closed"}) is None
        assert store.exists("complaints", {"description": "a"})
        assert not store.exists("complaints", {"description": "z"})

    def test_find_by_id(self, store):
        store.insert("complaints", {"description": "first"})
        assert store.find_by_id("complaints", 1)["description"] == "first"
        assert store.find_by_id("complaints", 2) is None

    def test_update_by_id(self, store):
        store.insert("complaints", {"description": "first", "status": "submitted"})

        updated = store.update_by_id("complaints", 1, {"status": "resolved", "id": 99})

        assert updated["id"] == 1
        assert updated["status"] == "resolved"
        assert updated["description"] == "first"
        assert updated["updated_at"]
        assert store.find_by_id("complaints", 1)["status"] == "resolved"

    def test_update_unknown_id(self, store):
        assert store.update_by_id("complaints", 7, {"status": "resolved"}) is None

    def test_delete_by_id(self, store):
        store.insert("complaints", {"description": "first"})
        assert store.delete_by_id("complaints", 1) is True
        assert store.delete_by_id("complaints", 1) is False
        assert store.get_all("complaints") == []

    def test_missing_collection_reads_empty(self, tmp_path):
        assert JsonRecordStore(tmp_path).get_all("complaints") == []

    def test_corrupt_collection(self, store):
        (store.data_dir / "complaints.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ProcessingError) as exc_info:
            store.get_all("complaints")
        assert exc_info.value.details["stage"] == "read"

    def test_persisted_between_instances(self, store):
        store.insert("complaints", {"description": "first"})
        reopened = JsonRecordStore(store.data_dir)
        assert reopened.find_by_id("complaints", 1)["description"] == "first"

    def test_initialize_named_collections(self, tmp_path):
        record_store = JsonRecordStore(tmp_path)
        record_store.initialize(("complaints", "users"))
        assert (tmp_path / "users.json").exists()
