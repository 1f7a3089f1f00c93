"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers (authors, collectors,
quotes, reports, info) under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import authors, collectors, info, quotes, reports

router = APIRouter()

router.include_router(authors.router, prefix="/authors", tags=["authors"])
router.include_router(collectors.router, prefix="/collectors", tags=["collectors"])
router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
router.include_router(info.router, prefix="/info", tags=["info"])
