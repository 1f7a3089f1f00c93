"""
Main entrypoint for the Quote Keeper API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn quote_keeper_api.app.main:app --reload

The record store, clock and id generator are kept on ``app.state`` and
can be injected, which is how the tests run the API against in-memory
collections.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.clock import Clock, SystemClock
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.base import IdFactory, new_uuid
from .storage.collections import RecordStore, build_store

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration; defaults to the module-level settings.
    store : Optional[RecordStore]
        Collections to serve.  When omitted, the store selected by
        ``settings.storage_backend`` is built at startup.
    clock : Optional[Clock]
        Timestamp source, shared by all requests.
    id_factory : Optional[Callable[[], str]]
        Record id generator.
    """
    settings = settings or default_settings
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "store", None) is None:
            # Creates the SQLite file and applies migrations if needed.
            app.state.store = build_store(settings)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.clock = clock or SystemClock()
    app.state.id_factory = id_factory or new_uuid

    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
