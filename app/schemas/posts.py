"""Post schemas for request/response validation."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from app.models.post import PostOptions


class PostCreate(BaseModel):
    """Schema for creating a post in a thread."""

    content: str = Field(..., min_length=1, description="Body of the post")
    id: str = Field(..., min_length=1, description="Id of the thread the post belongs to")
    options: Optional[PostOptions] = Field(None, description="Optional formatting")


class PostUpdate(BaseModel):
    """Schema for updating a post; omitted fields are left unchanged."""

    content: Optional[str] = Field(None, min_length=1, description="New body of the post")
    options: Optional[PostOptions] = Field(None, description="New formatting")


class PostResponse(BaseModel):
    """Schema for post response."""

    id: str = Field(..., alias="_id", description="MongoDB ObjectId")
    author: str = Field(..., description="Username of the post's author")
    content: str
    thread: str = Field(..., description="Id of the owning thread")
    options: Optional[PostOptions] = None
    created_at: Optional[datetime] = Field(None, description="Timestamp when the post was created")
    updated_at: Optional[datetime] = Field(None, description="Timestamp when the post was last updated")

    class Config:
        """Pydantic config."""
        populate_by_name = True


class PostCreateResponse(BaseModel):
    msg: str
    post: PostResponse
