"""
Pydantic schemas for collectors.

A caller registers as a collector once; the collector record binds the
caller's principal to a display name.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.identity import Principal


class CollectorPayload(BaseModel):
    """Schema for registering or renaming a collector."""

    collector_name: str = Field(..., description="Display name of the collector")


class Collector(BaseModel):
    """Stored collector record."""

    model_config = ConfigDict(frozen=True)

    id: str
    principal: Principal
    collector_name: str
    created_at: int
    updated_at: Optional[int] = None
