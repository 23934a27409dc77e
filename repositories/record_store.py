"""
Generic ordered record store.

A RecordStore is a durable map from a string id to a pydantic record,
backed by one SQLite table. Entries come back in insertion order. There
are no update or delete operations: stores are append-only.

All SQL for records lives here - no SQL in service or API layers.
"""
import logging
import sqlite3
from typing import Generic, Iterator, Optional, Type, TypeVar

from pydantic import BaseModel

from repositories.base import Database

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """
    Ordered key-value store for one entity kind.

    Records are serialized with pydantic's JSON encoder, so enum fields and
    nested types survive a round trip through the database.
    """

    def __init__(self, db: Database, table: str, record_model: Type[RecordT]):
        """
        Args:
            db: Database instance for data access.
            table: Name of the backing table; created if missing.
            record_model: Pydantic model the stored rows decode into.
        """
        self._db = db
        self._table = table
        self._model = record_model
        db.ensure_record_table(table)

    @property
    def name(self) -> str:
        return self._table

    def insert(self, key: str, value: RecordT) -> None:
        """
        Add a new entry.

        Raises:
            sqlite3.IntegrityError: If the key is already present. Entries are
                never overwritten.
        """
        conn = self._db.get_connection()
        try:
            conn.execute(
                f"INSERT INTO {self._table} (id, data) VALUES (?, ?)",
                (key, value.model_dump_json())
            )
            conn.commit()
        except sqlite3.IntegrityError:
            logger.error(f"Refusing to overwrite existing key in {self._table}: {key}")
            raise
        finally:
            conn.close()

    def get(self, key: str) -> Optional[RecordT]:
        """Point lookup. Returns None if the key is absent."""
        conn = self._db.get_connection()
        try:
            row = conn.execute(
                f"SELECT data FROM {self._table} WHERE id = ?",
                (key,)
            ).fetchone()
        finally:
            conn.close()

        if row is None:
            return None
        return self._model.model_validate_json(row[0])

    def values(self) -> Iterator[RecordT]:
        """
        All records in insertion order.

        The rows are read when this is called; the returned iterator is a
        one-shot snapshot that later inserts do not affect.
        """
        conn = self._db.get_connection()
        try:
            rows = conn.execute(
                f"SELECT data FROM {self._table} ORDER BY seq ASC"
            ).fetchall()
        finally:
            conn.close()

        return iter([self._model.model_validate_json(row[0]) for row in rows])

    def __len__(self) -> int:
        conn = self._db.get_connection()
        try:
            (count,) = conn.execute(f"SELECT COUNT(*) FROM {self._table}").fetchone()
        finally:
            conn.close()
        return count
