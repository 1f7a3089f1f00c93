"""
Keyed record collections.

The services never touch storage directly; they receive a
:class:`~quote_keeper_api.app.storage.collections.RecordStore` holding
the three collections, so an in-memory store can replace the SQLite
one in tests.
"""

from .collections import (  # noqa: F401
    KeyedCollection,
    MemoryCollection,
    RecordStore,
    SqliteCollection,
    build_store,
)
