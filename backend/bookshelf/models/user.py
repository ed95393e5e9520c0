"""
User model for the users collection.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    User document model for the MongoDB users collection.
    
    ``books`` holds book references in stored order: embedded book
    documents, or ids linking into the books collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    password: str = Field(..., description="Bcrypt hashed password")
    books: list[Any] = Field(
        default_factory=list,
        description="Book references in stored order"
    )
