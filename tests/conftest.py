"""Shared fixtures for the Quote Keeper test suite."""

import itertools
from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from quote_keeper_api.app.core.clock import ManualClock
from quote_keeper_api.app.core.config import Settings
from quote_keeper_api.app.core.identity import Principal
from quote_keeper_api.app.core.security import create_access_token
from quote_keeper_api.app.main import create_app
from quote_keeper_api.app.services.author_service import AuthorService
from quote_keeper_api.app.services.collector_service import CollectorService
from quote_keeper_api.app.services.query_service import QueryService
from quote_keeper_api.app.services.quote_service import QuoteService
from quote_keeper_api.app.storage.collections import RecordStore

TEST_SECRET = "test-secret"


@pytest.fixture
def store() -> RecordStore:
    return RecordStore.in_memory()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(start=1_000, step=10)


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic ids that sort in creation order."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter):04d}"


@pytest.fixture
def alice() -> Principal:
    return Principal("alice")


@pytest.fixture
def bob() -> Principal:
    return Principal("bob")


@pytest.fixture
def author_service(store, clock, id_factory) -> AuthorService:
    return AuthorService(store, clock=clock, id_factory=id_factory)


@pytest.fixture
def collector_service(store, clock, id_factory) -> CollectorService:
    return CollectorService(store, clock=clock, id_factory=id_factory)


@pytest.fixture
def quote_service(store, clock, id_factory) -> QuoteService:
    return QuoteService(store, clock=clock, id_factory=id_factory)


@pytest.fixture
def query_service(store) -> QueryService:
    return QueryService(store)


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", secret_key=TEST_SECRET)


@pytest.fixture
def app(settings, store, clock, id_factory):
    return create_app(settings=settings, store=store, clock=clock, id_factory=id_factory)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def make_token(principal: str) -> str:
    return create_access_token({"sub": principal}, secret_key=TEST_SECRET)


@pytest.fixture
def auth_headers() -> Callable[[str], Dict[str, str]]:
    """Build an Authorization header for the named principal."""

    def _headers(principal: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(principal)}"}

    return _headers
