"""
Book model for the books collection and for books embedded in users.
"""
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """Book document. Metadata beyond the title is kept as-is."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    title: str = Field(..., description="Book title")

    def to_document(self) -> dict[str, Any]:
        """Document ready for insertion (no ``_id`` unless one was set)."""
        doc = self.model_dump(by_alias=True, exclude_none=True)
        if "_id" in doc:
            doc["_id"] = ObjectId(doc["_id"])
        return doc


def _stringify(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _stringify(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify(v) for v in value]
    return value


def public_document(doc: dict[str, Any]) -> dict[str, Any]:
    """
    Copy of a stored document safe to return from the API.
    
    Keys are kept as stored; every ObjectId is rendered as a string.
    """
    return _stringify(dict(doc))
