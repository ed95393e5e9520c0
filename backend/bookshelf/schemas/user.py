"""
User response schemas.
"""
from pydantic import BaseModel, Field

from bookshelf.schemas.book import BookResponse


class UserProfileResponse(BaseModel):
    """Name and book collection of a user (excludes credentials)."""
    name: str = Field(..., description="User display name")
    books: list[BookResponse] = Field(
        default_factory=list,
        description="Books in stored order"
    )
