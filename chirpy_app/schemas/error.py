from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every JSON error response"""
    error: str
