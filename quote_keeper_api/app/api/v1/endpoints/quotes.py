"""
Quote endpoints for API v1.

Anyone may read quotes.  Uploading requires an authenticated caller
and an existing author; only the uploader may update or delete a
quote.  Filter routes are declared before ``/{quote_id}`` so that
their fixed paths take precedence.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from quote_keeper_api.app.api.dependencies import get_query_service, get_quote_service
from quote_keeper_api.app.core.errors import StoreError
from quote_keeper_api.app.core.identity import Principal
from quote_keeper_api.app.core.security import get_current_principal
from quote_keeper_api.app.schemas.common import DeleteConfirmation
from quote_keeper_api.app.schemas.quote import Quote, QuoteCreate, QuoteUpdate
from quote_keeper_api.app.services.query_service import QueryService
from quote_keeper_api.app.services.quote_service import QuoteService

router = APIRouter()


@router.get("/", response_model=List[Quote], summary="List quotes")
async def list_quotes(queries: QueryService = Depends(get_query_service)) -> List[Quote]:
    try:
        return queries.list_quotes()
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/mine", response_model=List[Quote], summary="Quotes uploaded by the caller")
async def list_my_quotes(
    caller: Principal = Depends(get_current_principal),
    queries: QueryService = Depends(get_query_service),
) -> List[Quote]:
    try:
        return queries.quotes_by_principal(caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get(
    "/by-collector/{collector_id}",
    response_model=List[Quote],
    summary="Quotes by collector id",
)
async def list_quotes_by_collector_id(
    collector_id: str,
    queries: QueryService = Depends(get_query_service),
) -> List[Quote]:
    try:
        return queries.quotes_by_collector_id(collector_id)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/by-author/{author_id}", response_model=List[Quote], summary="Quotes by author id")
async def list_quotes_by_author_id(
    author_id: str,
    queries: QueryService = Depends(get_query_service),
) -> List[Quote]:
    try:
        return queries.quotes_by_author_id(author_id)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/by-author-name", response_model=List[Quote], summary="Quotes by author name")
async def list_quotes_by_author_name(
    name: str = Query(..., min_length=1, description="Author name, matched case-insensitively"),
    queries: QueryService = Depends(get_query_service),
) -> List[Quote]:
    """Return the quotes of the author with the given name.

    Returns HTTP 404 if no author has that name.
    """
    try:
        return queries.quotes_by_author_name(name)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{quote_id}", response_model=Quote, summary="Get a quote")
async def get_quote(
    quote_id: str,
    queries: QueryService = Depends(get_query_service),
) -> Quote:
    try:
        return queries.get_quote(quote_id)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post(
    "/",
    response_model=Quote,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a quote",
)
async def upload_quote(
    data: QuoteCreate,
    caller: Principal = Depends(get_current_principal),
    quotes: QuoteService = Depends(get_quote_service),
) -> Quote:
    """Upload a quote attributed to an existing author.

    Returns HTTP 404 if ``author_id`` does not match any author.
    """
    try:
        return quotes.upload_quote(data, caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/{quote_id}", response_model=Quote, summary="Update a quote")
async def update_quote(
    quote_id: str,
    data: QuoteUpdate,
    caller: Principal = Depends(get_current_principal),
    quotes: QuoteService = Depends(get_quote_service),
) -> Quote:
    try:
        return quotes.update_quote(quote_id, data, caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{quote_id}", response_model=DeleteConfirmation, summary="Delete a quote")
async def delete_quote(
    quote_id: str,
    caller: Principal = Depends(get_current_principal),
    quotes: QuoteService = Depends(get_quote_service),
) -> DeleteConfirmation:
    try:
        detail = quotes.delete_quote(quote_id, caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return DeleteConfirmation(id=quote_id, detail=detail)
