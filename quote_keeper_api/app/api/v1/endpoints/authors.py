"""
Author endpoints for API v1.

Listing and retrieving authors is public.  Creating an author requires
an authenticated caller, who becomes the author's creator; only the
creator may update or delete it.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from quote_keeper_api.app.api.dependencies import get_author_service, get_query_service
from quote_keeper_api.app.core.errors import StoreError
from quote_keeper_api.app.core.identity import Principal
from quote_keeper_api.app.core.security import get_current_principal
from quote_keeper_api.app.schemas.author import Author, AuthorCreate, AuthorUpdate
from quote_keeper_api.app.schemas.common import DeleteConfirmation
from quote_keeper_api.app.services.author_service import AuthorService
from quote_keeper_api.app.services.query_service import QueryService

router = APIRouter()


@router.get("/", response_model=List[Author], summary="List authors")
async def list_authors(queries: QueryService = Depends(get_query_service)) -> List[Author]:
    try:
        return queries.list_authors()
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{author_id}", response_model=Author, summary="Get an author")
async def get_author(
    author_id: str,
    queries: QueryService = Depends(get_query_service),
) -> Author:
    """Retrieve a single author by ID.  Returns HTTP 404 if missing."""
    try:
        return queries.get_author(author_id)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post(
    "/",
    response_model=Author,
    status_code=status.HTTP_201_CREATED,
    summary="Create an author",
)
async def create_author(
    data: AuthorCreate,
    caller: Principal = Depends(get_current_principal),
    authors: AuthorService = Depends(get_author_service),
) -> Author:
    """Add a new author.

    ``name`` must be non-empty and ``birth_year`` positive, otherwise
    HTTP 422 is returned.
    """
    try:
        return authors.create_author(data, caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/{author_id}", response_model=Author, summary="Update an author")
async def update_author(
    author_id: str,
    data: AuthorUpdate,
    caller: Principal = Depends(get_current_principal),
    authors: AuthorService = Depends(get_author_service),
) -> Author:
    """Change the name and/or birth year of an author (creator only)."""
    try:
        return authors.update_author(author_id, data, caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{author_id}", response_model=DeleteConfirmation, summary="Delete an author")
async def delete_author(
    author_id: str,
    caller: Principal = Depends(get_current_principal),
    authors: AuthorService = Depends(get_author_service),
) -> DeleteConfirmation:
    """Delete an author (creator only).

    Quotes attributed to the author are kept.
    """
    try:
        detail = authors.delete_author(author_id, caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return DeleteConfirmation(id=author_id, detail=detail)
