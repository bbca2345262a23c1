"""Base models and common imports for all models."""

from datetime import datetime, UTC
from typing import Optional, Dict, Any
from bson import ObjectId
from pydantic import BaseModel as PydanticBaseModel, Field


class BaseModel(PydanticBaseModel):
    """Base model with common fields for MongoDB documents."""

    id: Optional[ObjectId] = Field(default=None, alias="_id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: Optional[datetime] = None

    class Config:
        """Pydantic config."""
        arbitrary_types_allowed = True
        populate_by_name = True

    def to_mongo(self) -> Dict[str, Any]:
        """Convert model to MongoDB document."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        return data

    @classmethod
    def from_mongo(cls, data: Optional[Dict[str, Any]]):
        """Create model instance from MongoDB document."""
        if not data:
            return None
        return cls(**data)
