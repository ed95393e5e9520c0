"""
Shared response schemas.
"""
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain message body, used for errors and confirmations."""
    message: str = Field(..., description="Human readable message")
