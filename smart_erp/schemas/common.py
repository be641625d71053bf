"""Schemas shared by the record collections."""

from pydantic import BaseModel, Field


class BulkDeleteRequest(BaseModel):
    """IDs to delete in one request."""

    ids: list[int] = Field(..., min_length=1)


class BulkDeleteResponse(BaseModel):
    """Result of a bulk delete."""

    message: str
    deleted_count: int
