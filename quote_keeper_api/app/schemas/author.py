"""
Pydantic schemas for authors.

An author is the person a quote is attributed to.  Anyone may add an
author; only the caller that created it may edit or delete it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from ..core.identity import Principal


class AuthorCreate(BaseModel):
    """Schema for creating a new author."""

    name: str = Field(..., description="Name of the author")
    birth_year: StrictInt = Field(..., description="Year of birth of the author")


class AuthorUpdate(BaseModel):
    """Schema for updating an author.

    All fields are optional; only provided values will be updated.
    """

    name: Optional[str] = None
    birth_year: Optional[StrictInt] = None


class Author(BaseModel):
    """Stored author record."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    birth_year: int
    creator: Principal
    created_at: int
    updated_at: Optional[int] = None
