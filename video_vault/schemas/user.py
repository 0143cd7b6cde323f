"""Pydantic schemas for users."""

import uuid

from pydantic import BaseModel, ConfigDict

from ..models.user import UserRole


class UserResponse(BaseModel):
    """Public user fields, as listed for folder editors."""
    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    role: UserRole

    model_config = ConfigDict(from_attributes=True)
