"""Shared plumbing for the record lifecycle services."""

import uuid
from typing import Callable, Optional

from ..core.clock import Clock, SystemClock
from ..storage.collections import RecordStore

IdFactory = Callable[[], str]


def new_uuid() -> str:
    return str(uuid.uuid4())


class RecordService:
    """Base class holding the store, the clock and the id generator.

    Parameters
    ----------
    store : RecordStore
        Collections to read and write.
    clock : Optional[Clock]
        Source of ``created_at``/``updated_at`` values.  Defaults to a
        :class:`SystemClock`.
    id_factory : Optional[Callable[[], str]]
        Generator of fresh record ids.  Defaults to uuid4 strings.
    """

    def __init__(
        self,
        store: RecordStore,
        clock: Optional[Clock] = None,
        id_factory: Optional[IdFactory] = None,
    ) -> None:
        self.store = store
        self.clock = clock or SystemClock()
        self.new_id = id_factory or new_uuid
