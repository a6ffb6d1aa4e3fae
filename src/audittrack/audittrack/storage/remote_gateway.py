from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..cloud.model import RemoteConfig
from ..core.constants import COLUMNS
from ..core.enums import Collection
from ..database.connection import DatabaseConnection, DBConfig
from ..database.mysql_base import db_cursor, fetchall, quote_ident

logger = logging.getLogger(__name__)


class RemoteGateway:
    """Gateway over the shared MySQL tables.

    Every failure is logged and swallowed: a failed read yields an empty
    collection (None from ``try_list``), a failed write is a no-op. ``ping``
    is the exception and raises, so callers can validate a configuration.
    """

    is_remote = True

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @classmethod
    def from_config(cls, config: RemoteConfig) -> "RemoteGateway":
        return cls(DatabaseConnection(DBConfig.from_remote_config(config)))

    def ping(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT id FROM {quote_ident(Collection.PEOPLE.value)} LIMIT 1")
            fetchall(cur)

    def list(self, collection: Collection) -> Sequence[dict]:
        rows = self.try_list(collection)
        return rows if rows is not None else []

    def try_list(self, collection: Collection) -> Optional[Sequence[dict]]:
        """Like ``list`` but a failed read gives None instead of an empty collection."""
        cols = ", ".join(quote_ident(c) for c in COLUMNS[collection])
        sql = f"SELECT {cols} FROM {quote_ident(collection.value)}"
        if collection == Collection.ENTRIES:
            sql += f" ORDER BY {quote_ident('date')} DESC"

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql)
                return fetchall(cur)
        except Exception:
            logger.exception("Remote list failed for %s", collection.value)
            return None

    def insert(self, collection: Collection, row: dict) -> None:
        cols = COLUMNS[collection]
        sql = (
            f"INSERT INTO {quote_ident(collection.value)} ({', '.join(quote_ident(c) for c in cols)}) "
            f"VALUES ({', '.join(['%s'] * len(cols))})"
        )
        self._write(collection, sql, tuple(row.get(c) for c in cols))

    def upsert(self, collection: Collection, row: dict) -> None:
        cols = COLUMNS[collection]
        updates = ", ".join(f"{quote_ident(c)}=VALUES({quote_ident(c)})" for c in cols if c != "id")
        sql = (
            f"INSERT INTO {quote_ident(collection.value)} ({', '.join(quote_ident(c) for c in cols)}) "
            f"VALUES ({', '.join(['%s'] * len(cols))}) "
            f"ON DUPLICATE KEY UPDATE {updates}"
        )
        self._write(collection, sql, tuple(row.get(c) for c in cols))

    def delete(self, collection: Collection, row_id: str) -> None:
        # Dependent time entries go with it (ON DELETE CASCADE).
        sql = f"DELETE FROM {quote_ident(collection.value)} WHERE id=%s"
        self._write(collection, sql, (str(row_id),))

    def _write(self, collection: Collection, sql: str, params: tuple) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, params)
        except Exception:
            logger.exception("Remote write failed for %s", collection.value)

    def describe(self) -> str:
        return f"mysql:{self._conn_factory.config.describe()}"
