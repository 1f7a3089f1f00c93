"""Schemas shared by several endpoints."""

from pydantic import BaseModel


class DeleteConfirmation(BaseModel):
    """Returned by delete endpoints."""

    id: str
    detail: str
