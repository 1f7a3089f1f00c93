"""
Business logic for authors.

Anyone may add an author.  The caller that created an author is
recorded as its ``creator`` and is the only principal allowed to
update or delete it.  Deleting an author does not touch the quotes
that reference it.
"""

import logging
from typing import Any, Mapping

from ..core.errors import NotFoundError
from ..core.identity import Principal
from ..schemas.author import Author, AuthorCreate, AuthorUpdate
from .base import RecordService
from .validation import authorize_owner, require_positive, require_text, validate_changes

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("name", "birth_year")


def merge_author(current: Author, changes: Mapping[str, Any], now: int) -> Author:
    """Return a copy of ``current`` with ``changes`` applied.

    Only ``name`` and ``birth_year`` can change; anything else in
    ``changes`` is ignored.  ``updated_at`` is set to ``now``.
    """
    update = {field: changes[field] for field in MUTABLE_FIELDS if field in changes}
    update["updated_at"] = now
    return current.model_copy(update=update)


class AuthorService(RecordService):
    """Create, update and delete authors."""

    def create_author(self, data: AuthorCreate, caller: Principal) -> Author:
        require_text("name", data.name)
        require_positive("birth_year", data.birth_year)
        author = Author(
            id=self.new_id(),
            name=data.name,
            birth_year=data.birth_year,
            creator=caller,
            created_at=self.clock.now(),
            updated_at=None,
        )
        self.store.authors.insert(author.id, author)
        logger.info("Principal %s created author %s", caller, author.id)
        return author

    def update_author(self, author_id: str, data: AuthorUpdate, caller: Principal) -> Author:
        """Merge the provided fields into an existing author.

        Raises ``NotFoundError`` if the author does not exist,
        ``UnauthorizedError`` if the caller did not create it and
        ``ValidationError`` if a provided field is empty or not
        positive.
        """
        author = self.store.authors.get(author_id)
        if author is None:
            raise NotFoundError(f"Couldn't update an author with id={author_id}. Author not found.")
        authorize_owner(author.creator, caller, "update this author's information")
        changes = data.model_dump(exclude_none=True)
        validate_changes(changes, positive_fields=frozenset({"birth_year"}))
        updated = merge_author(author, changes, self.clock.now())
        self.store.authors.insert(author.id, updated)
        logger.info("Principal %s updated author %s", caller, author.id)
        return updated

    def delete_author(self, author_id: str, caller: Principal) -> str:
        author = self.store.authors.get(author_id)
        if author is None:
            raise NotFoundError(f"Couldn't delete an author with id={author_id}. Author not found.")
        authorize_owner(author.creator, caller, "delete this author")
        self.store.authors.remove(author_id)
        logger.info("Principal %s deleted author %s", caller, author_id)
        return "Author deleted successfully."
