"""
Business logic for quotes.

Uploading a quote checks that the referenced author exists at that
moment; the check is not repeated later, so deleting an author or
changing ``author_id`` through an update can leave a quote pointing at
an author that does not exist.  The uploader's principal is stored in
``collector`` and is the only principal allowed to update or delete
the quote.  ``collector_id`` is taken from the payload as is.
"""

import logging
from typing import Any, Mapping

from ..core.errors import NotFoundError
from ..core.identity import Principal
from ..schemas.quote import Quote, QuoteCreate, QuoteUpdate
from ..storage.collections import RecordStore
from .base import RecordService
from .validation import authorize_owner, require_text, validate_changes

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("content", "author_id", "collector_id")


def ensure_author_exists(store: RecordStore, author_id: str) -> None:
    """Scan the author collection for ``author_id``.

    Raises ``NotFoundError`` when no author has that id.
    """
    for author in store.authors.values():
        if author.id == author_id:
            return
    raise NotFoundError(f"Author with id {author_id} not found")


def merge_quote(current: Quote, changes: Mapping[str, Any], now: int) -> Quote:
    """Return a copy of ``current`` with the mutable fields in ``changes`` applied."""
    update = {field: changes[field] for field in MUTABLE_FIELDS if field in changes}
    update["updated_at"] = now
    return current.model_copy(update=update)


class QuoteService(RecordService):
    """Upload, update and delete quotes."""

    def upload_quote(self, data: QuoteCreate, caller: Principal) -> Quote:
        require_text("content", data.content)
        require_text("author_id", data.author_id)
        require_text("collector_id", data.collector_id)
        ensure_author_exists(self.store, data.author_id)
        quote = Quote(
            id=self.new_id(),
            content=data.content,
            author_id=data.author_id,
            collector_id=data.collector_id,
            collector=caller,
            created_at=self.clock.now(),
            updated_at=None,
        )
        self.store.quotes.insert(quote.id, quote)
        logger.info("Principal %s uploaded quote %s", caller, quote.id)
        return quote

    def update_quote(self, quote_id: str, data: QuoteUpdate, caller: Principal) -> Quote:
        """Merge the provided fields into an existing quote.

        A new ``author_id`` is stored without checking that the author
        exists.
        """
        quote = self.store.quotes.get(quote_id)
        if quote is None:
            raise NotFoundError(f"Couldn't update a quote with id={quote_id}. Quote not found.")
        authorize_owner(quote.collector, caller, "update the quote content")
        changes = data.model_dump(exclude_none=True)
        validate_changes(changes)
        updated = merge_quote(quote, changes, self.clock.now())
        self.store.quotes.insert(quote.id, updated)
        logger.info("Principal %s updated quote %s", caller, quote.id)
        return updated

    def delete_quote(self, quote_id: str, caller: Principal) -> str:
        quote = self.store.quotes.get(quote_id)
        if quote is None:
            raise NotFoundError(f"Couldn't delete a quote with id={quote_id}. Quote not found")
        authorize_owner(quote.collector, caller, "delete the quote")
        self.store.quotes.remove(quote_id)
        logger.info("Principal %s deleted quote %s", caller, quote_id)
        return "Quote deleted successfully."
