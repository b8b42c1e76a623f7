from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ChirpBase(BaseModel):
    body: str = Field(..., description="Chirp text, at most 140 characters")


class ChirpValidate(ChirpBase):
    pass


class ChirpCreate(ChirpBase):
    user_id: UUID = Field(..., description="Owner of the chirp")


class CleanedChirp(BaseModel):
    cleaned_body: str


class ChirpResponse(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID

    model_config = ConfigDict(from_attributes=True)
