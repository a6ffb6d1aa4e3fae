from __future__ import annotations

from datetime import datetime

import pytest

from src.audittrack.audittrack.core.constants import CASCADES
from src.audittrack.audittrack.core.enums import Collection
from src.audittrack.audittrack.storage.local_gateway import LocalGateway
from src.audittrack.audittrack.storage.local_store import LocalStore


class InMemoryGateway:
    """Stands in for the shared database: same ordering and cascade rules."""

    def __init__(self, *, is_remote: bool = True):
        self.is_remote = is_remote
        self.tables: dict[Collection, list[dict]] = {c: [] for c in Collection}
        self.list_calls = 0
        self.failing: set[Collection] = set()

    def list(self, collection):
        self.list_calls += 1
        rows = [dict(r) for r in self.tables[collection]]
        if collection == Collection.ENTRIES:
            rows.sort(key=lambda r: r.get("date") or "", reverse=True)
        return rows

    def try_list(self, collection):
        if collection in self.failing:
            return None
        return self.list(collection)

    def insert(self, collection, row):
        self.tables[collection].append(dict(row))

    def upsert(self, collection, row):
        rows = self.tables[collection]
        for i, existing in enumerate(rows):
            if existing["id"] == row["id"]:
                rows[i] = dict(row)
                return
        rows.append(dict(row))

    def delete(self, collection, row_id):
        self.tables[collection] = [r for r in self.tables[collection] if r["id"] != row_id]
        cascade = CASCADES.get(collection)
        if cascade:
            child, column = cascade
            self.tables[child] = [r for r in self.tables[child] if r.get(column) != row_id]

    def describe(self):
        return "memory"


@pytest.fixture
def fixed_now():
    return datetime(2025, 3, 10, 9, 30, 0)


@pytest.fixture
def local_store(tmp_path):
    return LocalStore(tmp_path / "data")


@pytest.fixture
def local_gateway(local_store):
    return LocalGateway(local_store)


@pytest.fixture
def remote_gateway():
    return InMemoryGateway()


@pytest.fixture
def folder_row():
    return {
        "id": "f_1",
        "name": "Revue annuelle",
        "number": "2025-014",
        "clientName": "ACME",
        "serviceType": "Audit",
        "budgetHours": 40,
    }


@pytest.fixture
def collab_row():
    return {
        "id": "c_1",
        "name": "Claire Martin",
        "department": "Audit",
        "hiringDate": "2024-09-01",
        "role": "Collaborateur",
    }
