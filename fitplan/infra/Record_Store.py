"""JSON-file record store: named collections of dict records with field-equality queries.

Layout on disk:
    {
      "users": [ {...}, ... ],
      "schedules": [ ... ],
      "workouts": [ ... ],
      "meals": [ ... ]
    }

Every public call takes the store lock, loads the file, works on the loaded
document and (for writes) persists it atomically. With ``path=None`` the
document is kept in memory only, which the tests use.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional, Union

from fitplan.utilities.constants import COLLECTIONS

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Predicate = Dict[str, Any]


class StoreUnavailableError(RuntimeError):
    """The backing file could not be read or written."""


def _matches(record: Record, predicate: Predicate) -> bool:
    return all(k in record and record[k] == v for k, v in predicate.items())


class JsonRecordStore:
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        self._lock = RLock()
        self._memory: Dict[str, List[Record]] = {name: [] for name in COLLECTIONS}
        if self.path is not None and not self.path.exists():
            self._write(self._memory)

    # -------------------- persistence --------------------
    def _read(self) -> Dict[str, List[Record]]:
        if self.path is None:
            return self._memory
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read record store %s: %s", self.path, e)
            raise StoreUnavailableError(f"Cannot read {self.path}") from e
        if not isinstance(data, dict):
            logger.error("Record store %s does not hold a JSON object", self.path)
            raise StoreUnavailableError(f"Unexpected top-level {type(data).__name__} in {self.path}")
        for name in COLLECTIONS:
            data.setdefault(name, [])
        return data

    def _write(self, data: Dict[str, List[Record]]) -> None:
        if self.path is None:
            self._memory = data
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".db_", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(data, tmp, indent=2, ensure_ascii=False)
                shutil.move(tmp_path, self.path)
            finally:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
        except OSError as e:
            logger.error("Failed to write record store %s: %s", self.path, e)
            raise StoreUnavailableError(f"Cannot write {self.path}") from e

    # -------------------- CRUD --------------------
    def find(self, collection: str, predicate: Predicate) -> Optional[Record]:
        with self._lock:
            for record in self._read().get(collection, []):
                if _matches(record, predicate):
                    return copy.deepcopy(record)
        return None

    def find_all(self, collection: str, predicate: Optional[Predicate] = None) -> List[Record]:
        predicate = predicate or {}
        with self._lock:
            return [copy.deepcopy(r) for r in self._read().get(collection, []) if _matches(r, predicate)]

    def insert(self, collection: str, *records: Record) -> None:
        with self._lock:
            data = self._read()
            data.setdefault(collection, []).extend(copy.deepcopy(r) for r in records)
            self._write(data)

    def update(self, collection: str, predicate: Predicate, patch: Record) -> int:
        """Shallow-merge ``patch`` into every matching record; returns the number updated."""
        with self._lock:
            data = self._read()
            count = 0
            for record in data.get(collection, []):
                if _matches(record, predicate):
                    record.update(copy.deepcopy(patch))
                    count += 1
            if count:
                self._write(data)
            return count

    def delete(self, collection: str, predicate: Predicate) -> int:
        with self._lock:
            data = self._read()
            kept = [r for r in data.get(collection, []) if not _matches(r, predicate)]
            removed = len(data.get(collection, [])) - len(kept)
            if removed:
                data[collection] = kept
                self._write(data)
            return removed


__all__ = ["JsonRecordStore", "StoreUnavailableError", "Record", "Predicate"]
