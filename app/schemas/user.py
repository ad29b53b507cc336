"""
User schemas.
"""

from datetime import datetime
from uuid import UUID

from app.schemas.base import BaseSchema


class UserResponse(BaseSchema):
    """User response schema (public data)."""

    id: UUID
    email: str
    full_name: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
