"""Thread schemas for request/response validation."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class ThreadCreate(BaseModel):
    """Schema for creating a thread.

    ``threadContent`` and ``members`` are comma-joined id lists.
    """

    title: str = Field(..., min_length=1, description="Thread title")
    threadContent: Optional[str] = Field(None, description="Comma-joined post ids to start the thread with")
    members: Optional[str] = Field(None, description="Comma-joined user ids of the initial members")


class ThreadDelete(BaseModel):
    """Schema for deleting a thread."""

    id: str = Field(..., min_length=1, description="Id of the thread to delete")


class ThreadTitleUpdate(BaseModel):
    """Schema for renaming a thread."""

    title: str = Field(..., min_length=1, description="New thread title")


class ThreadResponse(BaseModel):
    """Schema for thread response."""

    id: str = Field(..., alias="_id", description="MongoDB ObjectId")
    creator: str = Field(..., description="Username of the thread's creator")
    title: str
    members: List[str] = Field(default_factory=list, description="Member user ids in join order")
    content: List[str] = Field(default_factory=list, description="Post ids in timeline order")
    created_at: Optional[datetime] = Field(None, description="Timestamp when the thread was created")
    updated_at: Optional[datetime] = Field(None, description="Timestamp when the thread was last updated")

    class Config:
        """Pydantic config."""
        populate_by_name = True


class ThreadCreateResponse(BaseModel):
    msg: str
    thread: ThreadResponse
