from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    email: str = Field(..., description="Email address for the new account")


class UserResponse(BaseModel):
    """Serialized user, read straight from the ORM object (from_attributes)"""
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str

    model_config = ConfigDict(from_attributes=True)
