"""
Ordered key→record collections.

``KeyedCollection`` is the interface every service programs against:
``get``, ``insert`` (overwrite semantics), ``remove`` and ``values``.
Two implementations ship:

* ``MemoryCollection`` keeps frozen record objects in a dict and lives
  as long as the process.
* ``SqliteCollection`` stores each record as JSON in a ``key``/``value``
  table created by :func:`~quote_keeper_api.app.core.db.init_db`, so
  state survives restarts.

Both enumerate ``values()`` in key order.  Callers must not depend on
that order unless they sort explicitly.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.config import Settings
from ..core.db import COLLECTION_TABLES, get_cursor, init_db
from ..core.errors import InternalStorageError
from ..schemas.author import Author
from ..schemas.collector import Collector
from ..schemas.quote import Quote

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class KeyedCollection(ABC, Generic[RecordT]):
    """Interface over one collection of records keyed by id."""

    @abstractmethod
    def get(self, key: str) -> Optional[RecordT]:
        ...

    @abstractmethod
    def insert(self, key: str, record: RecordT) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...

    @abstractmethod
    def values(self) -> List[RecordT]:
        ...


class MemoryCollection(KeyedCollection[RecordT]):
    """Dict-backed collection."""

    def __init__(self) -> None:
        self._records: Dict[str, RecordT] = {}

    def get(self, key: str) -> Optional[RecordT]:
        return self._records.get(key)

    def insert(self, key: str, record: RecordT) -> None:
        self._records[key] = record

    def remove(self, key: str) -> None:
        self._records.pop(key, None)

    def values(self) -> List[RecordT]:
        return [self._records[key] for key in sorted(self._records)]


class SqliteCollection(KeyedCollection[RecordT]):
    """Collection persisted in a SQLite key/value table.

    A connection is opened per operation and closed afterwards.  Any
    ``sqlite3.Error`` is logged and re-raised as
    :class:`InternalStorageError`.
    """

    def __init__(self, table: str, model: Type[RecordT], database_url: Optional[str] = None) -> None:
        if table not in COLLECTION_TABLES:
            raise ValueError(f"Unknown collection table {table!r}")
        self.table = table
        self.model = model
        self.database_url = database_url

    def _fail(self, action: str, exc: sqlite3.Error) -> InternalStorageError:
        logger.error("Storage failure during %s on %s: %s", action, self.table, exc)
        return InternalStorageError(f"Could not {action} {self.table}: {exc}")

    def get(self, key: str) -> Optional[RecordT]:
        try:
            with get_cursor(self.database_url) as cursor:
                row = cursor.execute(
                    f"SELECT value FROM {self.table} WHERE key = ?", (key,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise self._fail("read", exc) from exc
        if row is None:
            return None
        return self.model.model_validate_json(row["value"])

    def insert(self, key: str, record: RecordT) -> None:
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(
                    f"INSERT OR REPLACE INTO {self.table} (key, value) VALUES (?, ?)",
                    (key, record.model_dump_json()),
                )
        except sqlite3.Error as exc:
            raise self._fail("write", exc) from exc

    def remove(self, key: str) -> None:
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(f"DELETE FROM {self.table} WHERE key = ?", (key,))
        except sqlite3.Error as exc:
            raise self._fail("delete from", exc) from exc

    def values(self) -> List[RecordT]:
        try:
            with get_cursor(self.database_url) as cursor:
                rows = cursor.execute(
                    f"SELECT value FROM {self.table} ORDER BY key"
                ).fetchall()
        except sqlite3.Error as exc:
            raise self._fail("read", exc) from exc
        return [self.model.model_validate_json(row["value"]) for row in rows]


@dataclass
class RecordStore:
    """The three collections the record store operates on."""

    authors: KeyedCollection[Author]
    collectors: KeyedCollection[Collector]
    quotes: KeyedCollection[Quote]

    @classmethod
    def in_memory(cls) -> RecordStore:
        return cls(
            authors=MemoryCollection(),
            collectors=MemoryCollection(),
            quotes=MemoryCollection(),
        )

    @classmethod
    def sqlite(cls, database_url: Optional[str] = None) -> RecordStore:
        init_db(database_url)
        return cls(
            authors=SqliteCollection("authors", Author, database_url),
            collectors=SqliteCollection("collectors", Collector, database_url),
            quotes=SqliteCollection("quotes", Quote, database_url),
        )


def build_store(settings: Settings) -> RecordStore:
    """Build the store selected by ``settings.storage_backend``."""
    backend = settings.storage_backend.lower()
    if backend == "memory":
        logger.info("Using in-memory record store")
        return RecordStore.in_memory()
    if backend == "sqlite":
        logger.info("Using SQLite record store at %s", settings.database_url)
        return RecordStore.sqlite(settings.database_url)
    raise ValueError(f"Unsupported storage backend {settings.storage_backend!r}")
