"""
Information endpoint for API v1.

Returns the service name, version, the storage backend in use and the
number of records in each collection.  Publicly accessible.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from quote_keeper_api.app.api.dependencies import get_query_service
from quote_keeper_api.app.core.errors import StoreError
from quote_keeper_api.app.services.query_service import QueryService

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(
    request: Request,
    queries: QueryService = Depends(get_query_service),
) -> Dict[str, Any]:
    settings = request.app.state.settings
    try:
        counts = {
            "authors": len(queries.list_authors()),
            "collectors": len(queries.list_collectors()),
            "quotes": queries.total_quote_count(),
        }
    except StoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "storage_backend": settings.storage_backend,
        "counts": counts,
    }
