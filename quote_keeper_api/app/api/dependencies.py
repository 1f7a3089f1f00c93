"""
FastAPI dependencies wiring services to the application state.

``create_app`` stores the record store, clock and id factory on
``app.state``; the functions below build a service around them for
each request.
"""

from fastapi import Request

from ..services.author_service import AuthorService
from ..services.collector_service import CollectorService
from ..services.query_service import QueryService
from ..services.quote_service import QuoteService
from ..storage.collections import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def _service_kwargs(request: Request) -> dict:
    state = request.app.state
    return {
        "store": state.store,
        "clock": state.clock,
        "id_factory": state.id_factory,
    }


def get_query_service(request: Request) -> QueryService:
    return QueryService(get_store(request))


def get_author_service(request: Request) -> AuthorService:
    return AuthorService(**_service_kwargs(request))


def get_collector_service(request: Request) -> CollectorService:
    return CollectorService(**_service_kwargs(request))


def get_quote_service(request: Request) -> QuoteService:
    return QuoteService(**_service_kwargs(request))
