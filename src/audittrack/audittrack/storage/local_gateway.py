from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import CASCADES, LOCAL_KEYS
from ..core.enums import Collection
from .local_store import LocalStore


class LocalGateway:
    """Gateway over JSON snapshots, one key per collection.

    Time entries are kept newest first. Deleting a person or a folder also
    removes its time entries, like the remote foreign keys do.
    """

    is_remote = False

    def __init__(self, store: LocalStore):
        self._store = store

    def _load(self, collection: Collection) -> list[dict]:
        return list(self._store.get_list(LOCAL_KEYS[collection]) or [])

    def _save(self, collection: Collection, rows: list[dict]) -> None:
        self._store.set(LOCAL_KEYS[collection], rows)

    def list(self, collection: Collection) -> Sequence[dict]:
        return self._load(collection)

    def try_list(self, collection: Collection) -> Optional[Sequence[dict]]:
        return self._load(collection)

    def insert(self, collection: Collection, row: dict) -> None:
        rows = self._load(collection)
        if collection == Collection.ENTRIES:
            rows.insert(0, dict(row))
        else:
            rows.append(dict(row))
        self._save(collection, rows)

    def upsert(self, collection: Collection, row: dict) -> None:
        rows = self._load(collection)
        row_id = str(row.get("id") or "")
        for i, existing in enumerate(rows):
            if row_id and str(existing.get("id")) == row_id:
                rows[i] = dict(row)
                break
        else:
            rows.append(dict(row))
        self._save(collection, rows)

    def delete(self, collection: Collection, row_id: str) -> None:
        rows = self._load(collection)
        kept = [r for r in rows if str(r.get("id")) != str(row_id)]
        if len(kept) == len(rows):
            return
        self._save(collection, kept)

        cascade = CASCADES.get(collection)
        if cascade:
            child, column = cascade
            children = self._load(child)
            remaining = [r for r in children if str(r.get(column)) != str(row_id)]
            if len(remaining) != len(children):
                self._save(child, remaining)

    def describe(self) -> str:
        return f"local:{self._store.data_dir}"
