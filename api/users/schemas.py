"""
Users API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """
    Body for both create and update.

    Both fields are required: an update replaces the whole record, so a
    missing field is rejected instead of being blanked out.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    name: str = Field(...)
    email: str = Field(...)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str


class DeleteResponse(BaseModel):
    ok: bool
    id: int
