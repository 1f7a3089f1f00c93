"""
Report endpoints for API v1.

Aggregates computed from full scans of the author and quote
collections.  All of them are read-only and public.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from quote_keeper_api.app.api.dependencies import get_query_service
from quote_keeper_api.app.core.errors import StoreError
from quote_keeper_api.app.schemas.quote import AuthorWithQuotes, OldestNewestQuotes, QuoteCount
from quote_keeper_api.app.services.query_service import QueryService

router = APIRouter()


@router.get("/authors-with-quotes", response_model=List[AuthorWithQuotes])
async def authors_with_quotes(
    queries: QueryService = Depends(get_query_service),
) -> List[AuthorWithQuotes]:
    """Every author paired with the quotes attributed to it."""
    try:
        return queries.authors_with_quotes()
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/quote-count", response_model=QuoteCount)
async def quote_count(queries: QueryService = Depends(get_query_service)) -> QuoteCount:
    try:
        return QuoteCount(total=queries.total_quote_count())
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/oldest-newest-quotes", response_model=OldestNewestQuotes)
async def oldest_and_newest_quotes(
    queries: QueryService = Depends(get_query_service),
) -> OldestNewestQuotes:
    """The first and last quote by creation time.

    Returns HTTP 409 when fewer than two quotes are stored.
    """
    try:
        oldest, newest = queries.oldest_and_newest_quotes()
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return OldestNewestQuotes(oldest_quote=oldest, newest_quote=newest)


@router.get("/author-names", response_model=List[str])
async def unique_author_names(queries: QueryService = Depends(get_query_service)) -> List[str]:
    try:
        return queries.unique_author_names()
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
