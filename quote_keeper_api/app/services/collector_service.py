"""
Business logic for collectors.

A caller must register as a collector before it makes sense for it to
upload quotes.  Registration is a one-time act: each principal owns
at most one collector record, and only that principal may rename it.
"""

import logging
from typing import Any, Mapping

from ..core.errors import DuplicateRegistrationError, NotFoundError
from ..core.identity import Principal
from ..schemas.collector import Collector, CollectorPayload
from .base import RecordService
from .validation import authorize_owner, require_text

logger = logging.getLogger(__name__)


def merge_collector(current: Collector, changes: Mapping[str, Any], now: int) -> Collector:
    update = {"updated_at": now}
    if "collector_name" in changes:
        update["collector_name"] = changes["collector_name"]
    return current.model_copy(update=update)


class CollectorService(RecordService):
    """Register and rename collectors."""

    def register_collector(self, data: CollectorPayload, caller: Principal) -> Collector:
        """Create the caller's collector record.

        Fails with ``DuplicateRegistrationError`` when a collector with
        the caller's principal already exists.
        """
        require_text("collector_name", data.collector_name)
        for existing in self.store.collectors.values():
            if existing.principal == caller:
                raise DuplicateRegistrationError("Collector already registered")
        collector = Collector(
            id=self.new_id(),
            principal=caller,
            collector_name=data.collector_name,
            created_at=self.clock.now(),
            updated_at=None,
        )
        self.store.collectors.insert(collector.id, collector)
        logger.info("Principal %s registered as collector %s", caller, collector.id)
        return collector

    def update_collector(self, collector_id: str, data: CollectorPayload, caller: Principal) -> Collector:
        require_text("collector_name", data.collector_name)
        collector = self.store.collectors.get(collector_id)
        if collector is None:
            raise NotFoundError(
                f"Couldn't update a collector with id={collector_id}. Collector not found."
            )
        authorize_owner(collector.principal, caller, "update the collector info")
        updated = merge_collector(collector, data.model_dump(), self.clock.now())
        self.store.collectors.insert(collector.id, updated)
        logger.info("Principal %s renamed collector %s", caller, collector.id)
        return updated
