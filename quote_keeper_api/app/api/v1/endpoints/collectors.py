"""
Collector endpoints for API v1.

A caller registers once as a collector and may rename its own record.
The ``/me`` routes resolve the collector and quotes belonging to the
authenticated caller.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from quote_keeper_api.app.api.dependencies import get_collector_service, get_query_service
from quote_keeper_api.app.core.errors import StoreError
from quote_keeper_api.app.core.identity import Principal
from quote_keeper_api.app.core.security import get_current_principal
from quote_keeper_api.app.schemas.collector import Collector, CollectorPayload
from quote_keeper_api.app.schemas.quote import Quote
from quote_keeper_api.app.services.collector_service import CollectorService
from quote_keeper_api.app.services.query_service import QueryService

router = APIRouter()


@router.get("/", response_model=List[Collector], summary="List collectors")
async def list_collectors(queries: QueryService = Depends(get_query_service)) -> List[Collector]:
    try:
        return queries.list_collectors()
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/me", response_model=Collector, summary="Get the caller's collector record")
async def get_my_collector(
    caller: Principal = Depends(get_current_principal),
    queries: QueryService = Depends(get_query_service),
) -> Collector:
    try:
        return queries.collector_for_principal(caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/me/quotes", response_model=List[Quote], summary="Quotes by collector identity")
async def get_my_collected_quotes(
    caller: Principal = Depends(get_current_principal),
    queries: QueryService = Depends(get_query_service),
) -> List[Quote]:
    """Return every quote whose uploader is the current caller."""
    try:
        return queries.quotes_by_principal(caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{collector_id}", response_model=Collector, summary="Get a collector")
async def get_collector(
    collector_id: str,
    queries: QueryService = Depends(get_query_service),
) -> Collector:
    try:
        return queries.get_collector(collector_id)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post(
    "/",
    response_model=Collector,
    status_code=status.HTTP_201_CREATED,
    summary="Register as a collector",
)
async def register_collector(
    data: CollectorPayload,
    caller: Principal = Depends(get_current_principal),
    collectors: CollectorService = Depends(get_collector_service),
) -> Collector:
    """Register the caller as a collector.

    Returns HTTP 409 if the caller is already registered.
    """
    try:
        return collectors.register_collector(data, caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{collector_id}", response_model=Collector, summary="Rename a collector")
async def update_collector(
    collector_id: str,
    data: CollectorPayload,
    caller: Principal = Depends(get_current_principal),
    collectors: CollectorService = Depends(get_collector_service),
) -> Collector:
    """Change the collector name.  Only the registering caller may do this."""
    try:
        return collectors.update_collector(collector_id, data, caller)
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
