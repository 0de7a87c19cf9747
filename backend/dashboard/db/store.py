"""Flat-file JSON datastore.

The whole document (``{"users": [...], "projects": [...]}``) is read and
rewritten on every operation. There is no locking: two concurrent writers can
overwrite each other's changes.
"""
import json
from pathlib import Path
from typing import Any

from dashboard.core.logging import logger

COLLECTIONS = ("users", "projects")

Document = dict[str, list[dict[str, Any]]]


class JsonStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> Document:
        if not self.path.exists():
            return {name: [] for name in COLLECTIONS}
        with self.path.open("r", encoding="utf-8") as f:
            doc = json.load(f)
        for name in COLLECTIONS:
            doc.setdefault(name, [])
        return doc

    def write(self, doc: Document) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(doc, f, indent=2, ensure_ascii=False)

    def ensure_initialized(self) -> None:
        """Create the document, or fill in missing collections. Safe to call repeatedly."""
        existed = self.path.exists()
        raw: dict = {}
        if existed:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        if existed and all(name in raw for name in COLLECTIONS):
            return
        self.write(self.read())
        logger.info("datastore_initialized", path=str(self.path), created=not existed)

    def all(self, collection: str) -> list[dict[str, Any]]:
        return self.read()[collection]

    def get(self, collection: str, record_id: str) -> dict[str, Any] | None:
        for record in self.read()[collection]:
            if record.get("id") == record_id:
                return record
        return None

    def find(self, collection: str, **fields: Any) -> dict[str, Any] | None:
        for record in self.read()[collection]:
            if all(record.get(k) == v for k, v in fields.items()):
                return record
        return None

    def set(self, collection: str, record: dict[str, Any]) -> dict[str, Any]:
        """Insert or replace a record by id."""
        doc = self.read()
        records = doc[collection]
        for i, existing in enumerate(records):
            if existing.get("id") == record["id"]:
                records[i] = record
                break
        else:
            records.append(record)
        self.write(doc)
        return record

    def delete(self, collection: str, record_id: str) -> bool:
        doc = self.read()
        records = doc[collection]
        kept = [r for r in records if r.get("id") != record_id]
        if len(kept) == len(records):
            return False
        doc[collection] = kept
        self.write(doc)
        return True

    def counts(self) -> dict[str, int]:
        doc = self.read()
        return {name: len(doc[name]) for name in COLLECTIONS}
