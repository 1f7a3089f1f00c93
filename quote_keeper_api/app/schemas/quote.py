"""
Pydantic schemas for quotes and quote reports.

``collector`` holds the principal of the uploader and decides who may
change a quote.  ``collector_id`` is supplied by the uploader and is
informational only: it is neither checked against the collector
collection nor used for authorization.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.identity import Principal
from .author import Author


class QuoteCreate(BaseModel):
    """Schema for uploading a quote."""

    content: str = Field(..., description="Quote text")
    author_id: str = Field(..., description="Identifier of an existing author")
    collector_id: str = Field(..., description="Identifier of the uploading collector")


class QuoteUpdate(BaseModel):
    """Schema for updating a quote; omitted fields are left unchanged."""

    content: Optional[str] = None
    author_id: Optional[str] = None
    collector_id: Optional[str] = None


class Quote(BaseModel):
    """Stored quote record."""

    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    author_id: str
    collector_id: str
    collector: Principal
    created_at: int
    updated_at: Optional[int] = None


class AuthorWithQuotes(BaseModel):
    author: Author
    quotes: List[Quote]


class OldestNewestQuotes(BaseModel):
    oldest_quote: Quote
    newest_quote: Quote


class QuoteCount(BaseModel):
    total: int
