"""
Service layer.

Each service encapsulates the business rules for one kind of record
and works against the collections of an injected ``RecordStore``.
Services are synchronous: each call runs to completion before the
next one starts, and every failure is raised as a
:class:`~quote_keeper_api.app.core.errors.StoreError` subclass.
"""
