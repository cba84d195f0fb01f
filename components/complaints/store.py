"""
JSON file record store.

Keeps named collections (complaints, ...) as JSON arrays in a data
directory. Every record gets a sequential integer id and a created_at
timestamp on insert, and an updated_at timestamp on update.
"""

import json
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from components.base.exceptions import ProcessingError

logger = logging.getLogger(__name__)

DEFAULT_COLLECTIONS = ("complaints",)

Query = Union[Dict[str, Any], Callable[[Dict[str, Any]], bool]]


def _matches(record: Dict[str, Any], query: Query) -> bool:
    if callable(query):
        return bool(query(record))
    return all(record.get(key) == value for key, value in query.items())


class JsonRecordStore:
    """
    File-backed store over named record collections.

    Read-modify-write cycles are serialized with a lock, so concurrent
    request handlers in one process cannot lose each other's writes.

    Usage:
        store = JsonRecordStore(Path("data"))
        record = store.insert("complaints", {"description": "..."})
        store.update_by_id("complaints", record["id"], {"status": "resolved"})
    """

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)
        self._lock = threading.RLock()

    def initialize(self, collections=DEFAULT_COLLECTIONS) -> None:
        """Create the data directory and empty collection files."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for name in collections:
            path = self._path(name)
            if not path.exists():
                self._write(name, [])
        logger.info("Record store ready at %s", self.data_dir)

    def _path(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _read(self, collection: str) -> List[Dict[str, Any]]:
        path = self._path(collection)
        if not path.exists():
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
            return json.loads(content or "[]")
        except (OSError, json.JSONDecodeError) as e:
            raise ProcessingError(
                f"Could not read collection '{collection}'",
                component="record_store",
                stage="read",
                original_error=e,
            )

    def _write(self, collection: str, records: List[Dict[str, Any]]) -> None:
        path = self._path(collection)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, default=str)
            tmp_path.replace(path)
        except OSError as e:
            raise ProcessingError(
                f"Could not write collection '{collection}'",
                component="record_store",
                stage="write",
                original_error=e,
            )

    def get_all(self, collection: str) -> List[Dict[str, Any]]:
        with self._lock:
            return self._read(collection)

    def find_by_id(self, collection: str, record_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            for record in self._read(collection):
                if record.get("id") == record_id:
                    return record
        return None

    def find(self, collection: str, query: Query) -> List[Dict[str, Any]]:
        """Records matching every key/value in query, or a predicate."""
        with self._lock:
            return [record for record in self._read(collection) if _matches(record, query)]

    def find_one(self, collection: str, query: Query) -> Optional[Dict[str, Any]]:
        with self._lock:
            for record in self._read(collection):
                if _matches(record, query):
                    return record
        return None

    def exists(self, collection: str, query: Query) -> bool:
        return self.find_one(collection, query) is not None

    def insert(self, collection: str, record: Dict[str, Any]) -> Dict[str, Any]:
        """Append a record, assigning the next id and created_at."""
        with self._lock:
            records = self._read(collection)
            next_id = max((r.get("id") or 0 for r in records), default=0) + 1
            new_record = {
                **record,
                "id": next_id,
                "created_at": datetime.now().isoformat(),
            }
            records.append(new_record)
            self._write(collection, records)
        logger.debug("Inserted %s #%s", collection, next_id)
        return new_record

    def update_by_id(
        self, collection: str, record_id: int, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Merge updates into a record. Returns None when the id is unknown."""
        with self._lock:
            records = self._read(collection)
            for index, record in enumerate(records):
                if record.get("id") == record_id:
                    records[index] = {
                        **record,
                        **updates,
                        "id": record_id,
                        "updated_at": datetime.now().isoformat(),
                    }
                    self._write(collection, records)
                    return records[index]
        return None

    def delete_by_id(self, collection: str, record_id: int) -> bool:
        with self._lock:
            records = self._read(collection)
            remaining = [r for r in records if r.get("id") != record_id]
            if len(remaining) == len(records):
                return False
            self._write(collection, remaining)
        return True
