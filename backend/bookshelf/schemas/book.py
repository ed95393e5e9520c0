"""
Book response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from bookshelf.models.book import public_document


class BookResponse(BaseModel):
    """
    Book as returned by the API.
    
    Rendered with the stored ``_id`` key; extra metadata is passed through.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = Field(None, alias="_id", description="Book ID")
    title: str = Field(..., description="Book title")

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "BookResponse":
        return cls.model_validate(public_document(doc))
