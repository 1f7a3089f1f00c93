"""
Read-only queries and reports.

Every query takes a full snapshot of the relevant collection(s) and
filters it in Python.  There are no secondary indexes: the store is
meant for small datasets, and the author/quote join in
:meth:`QueryService.authors_with_quotes` is a plain nested scan.
None of these methods write.
"""

from typing import List, Tuple

from ..core.errors import InsufficientDataError, NotFoundError
from ..core.identity import Principal
from ..schemas.author import Author
from ..schemas.collector import Collector
from ..schemas.quote import AuthorWithQuotes, Quote
from ..storage.collections import RecordStore


class QueryService:
    """Lookups, filters and aggregates over the record store."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Listing and lookup by id
    # ------------------------------------------------------------------
    def list_authors(self) -> List[Author]:
        return self.store.authors.values()

    def list_collectors(self) -> List[Collector]:
        return self.store.collectors.values()

    def list_quotes(self) -> List[Quote]:
        return self.store.quotes.values()

    def get_author(self, author_id: str) -> Author:
        author = self.store.authors.get(author_id)
        if author is None:
            raise NotFoundError(f"Author with id={author_id} not found")
        return author

    def get_collector(self, collector_id: str) -> Collector:
        collector = self.store.collectors.get(collector_id)
        if collector is None:
            raise NotFoundError(f"Collector with id={collector_id} not found")
        return collector

    def get_quote(self, quote_id: str) -> Quote:
        quote = self.store.quotes.get(quote_id)
        if quote is None:
            raise NotFoundError(f"Quote with id={quote_id} not found")
        return quote

    def collector_for_principal(self, principal: Principal) -> Collector:
        """Return the collector registered by ``principal``."""
        for collector in self.store.collectors.values():
            if collector.principal == principal:
                return collector
        raise NotFoundError("No collector registered for the current caller")

    # ------------------------------------------------------------------
    # Quote filters
    # ------------------------------------------------------------------
    def quotes_by_principal(self, principal: Principal) -> List[Quote]:
        """Quotes uploaded by ``principal``.

        Serves both "quotes by current caller" and "quotes by collector
        identity".
        """
        return [quote for quote in self.store.quotes.values() if quote.collector == principal]

    def quotes_by_collector_id(self, collector_id: str) -> List[Quote]:
        return [quote for quote in self.store.quotes.values() if quote.collector_id == collector_id]

    def quotes_by_author_id(self, author_id: str) -> List[Quote]:
        return [quote for quote in self.store.quotes.values() if quote.author_id == author_id]

    def quotes_by_author_name(self, author_name: str) -> List[Quote]:
        """Quotes of the first author whose name matches case-insensitively.

        Raises ``NotFoundError`` when no author has that name, rather
        than returning an empty list.
        """
        wanted = author_name.lower()
        for author in self.store.authors.values():
            if author.name.lower() == wanted:
                return self.quotes_by_author_id(author.id)
        raise NotFoundError(f"Author with name={author_name} not found")

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def authors_with_quotes(self) -> List[AuthorWithQuotes]:
        quotes = self.store.quotes.values()
        return [
            AuthorWithQuotes(
                author=author,
                quotes=[quote for quote in quotes if quote.author_id == author.id],
            )
            for author in self.store.authors.values()
        ]

    def total_quote_count(self) -> int:
        return len(self.store.quotes.values())

    def oldest_and_newest_quotes(self) -> Tuple[Quote, Quote]:
        """Return ``(oldest, newest)`` by ``created_at``.

        At least two quotes are required; with fewer an
        ``InsufficientDataError`` is raised.  Ties keep the enumeration
        order of the collection (``sorted`` is stable).
        """
        quotes = sorted(self.store.quotes.values(), key=lambda quote: quote.created_at)
        if len(quotes) < 2:
            raise InsufficientDataError("There are not enough quotes to compare.")
        return quotes[0], quotes[-1]

    def unique_author_names(self) -> List[str]:
        """Author names without duplicates, in order of first occurrence."""
        return list(dict.fromkeys(author.name for author in self.store.authors.values()))
