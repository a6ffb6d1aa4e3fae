from __future__ import annotations

import logging

import mysql.connector
import pytest

from src.audittrack.audittrack.cloud.model import RemoteConfig
from src.audittrack.audittrack.core.enums import Collection
from src.audittrack.audittrack.database.connection import DatabaseConnection, DBConfig
from src.audittrack.audittrack.storage.gateway import select_gateway
from src.audittrack.audittrack.storage.local_gateway import LocalGateway
from src.audittrack.audittrack.storage.remote_gateway import RemoteGateway


class FakeCursor:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))

    def fetchall(self):
        return self.rows

    def close(self):
        pass


class FakeConn:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows=None, *, fail=False):
        self.cursor = FakeCursor(rows or [])
        self.fail = fail
        self.config = DBConfig(host="db", port=3306, user="audit", password="pw", database="audittrack")

    def connect(self):
        if self.fail:
            raise mysql.connector.Error("Can't connect to MySQL server")
        return FakeConn(self.cursor)


def test_entries_are_listed_by_date_descending():
    factory = FakeConnFactory(rows=[{"id": "entry_1"}])
    rows = RemoteGateway(factory).list(Collection.ENTRIES)

    sql, _ = factory.cursor.executed[0]
    assert rows == [{"id": "entry_1"}]
    assert "FROM `time_entries`" in sql
    assert sql.endswith("ORDER BY `date` DESC")


def test_people_listing_is_unordered():
    factory = FakeConnFactory()
    RemoteGateway(factory).list(Collection.PEOPLE)

    sql, _ = factory.cursor.executed[0]
    assert "`hiringDate`" in sql
    assert "ORDER BY" not in sql


def test_failed_list_is_logged_and_empty(caplog):
    gateway = RemoteGateway(FakeConnFactory(fail=True))

    with caplog.at_level(logging.ERROR):
        rows = gateway.list(Collection.FOLDERS)

    assert rows == []
    assert "Remote list failed for folders" in caplog.text


def test_upsert_uses_on_duplicate_key(folder_row):
    factory = FakeConnFactory()
    RemoteGateway(factory).upsert(Collection.FOLDERS, folder_row)

    sql, params = factory.cursor.executed[0]
    assert sql.startswith("INSERT INTO `folders`")
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert "`id`=VALUES" not in sql
    assert params == ("f_1", "Revue annuelle", "2025-014", "ACME", "Audit", 40)


def test_delete_targets_id():
    factory = FakeConnFactory()
    RemoteGateway(factory).delete(Collection.PEOPLE, "c_1")

    assert factory.cursor.executed == [("DELETE FROM `collaborators` WHERE id=%s", ("c_1",))]


def test_failed_write_is_swallowed(caplog, collab_row):
    gateway = RemoteGateway(FakeConnFactory(fail=True))

    with caplog.at_level(logging.ERROR):
        gateway.insert(Collection.PEOPLE, collab_row)

    assert "Remote write failed for collaborators" in caplog.text


def test_ping_raises_on_failure():
    with pytest.raises(mysql.connector.Error):
        RemoteGateway(FakeConnFactory(fail=True)).ping()


def test_select_gateway_by_config_presence(local_store):
    valid = RemoteConfig("mysql://audit@db.example.com:3306/audittrack", "secret")
    invalid = RemoteConfig("https://example.com", "secret")

    assert isinstance(select_gateway(valid, local_store), RemoteGateway)
    assert isinstance(select_gateway(invalid, local_store), LocalGateway)
    assert isinstance(select_gateway(None, local_store), LocalGateway)


def test_try_list_distinguishes_failure_from_empty():
    assert RemoteGateway(FakeConnFactory(fail=True)).try_list(Collection.PEOPLE) is None
    assert RemoteGateway(FakeConnFactory()).try_list(Collection.PEOPLE) == []


def test_each_gateway_gets_its_own_connection_factory():
    config = RemoteConfig("mysql://audit@db.example.com:3306/audittrack", "secret")

    first = RemoteGateway.from_config(config)
    second = RemoteGateway.from_config(config)

    assert first.describe() == "mysql:audit@db.example.com:3306/audittrack"
    assert first._conn_factory is not second._conn_factory
    assert not hasattr(DatabaseConnection, "get_instance")
