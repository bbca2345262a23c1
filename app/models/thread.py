"""This file contains the thread model for the application."""

from typing import List
from bson import ObjectId
from pydantic import Field

from app.models.base import BaseModel


class Thread(BaseModel):
    """Thread model: an ordered timeline of posts shared by its members.

    Attributes:
        id: MongoDB ObjectId
        creator: The user who created the thread; never changes
        title: Title shown for the thread, editable by the creator
        members: Users who joined, in join order, each at most once
        content: Post ids in the order the posts were added
        created_at: When the thread was created
    """

    creator: ObjectId
    title: str
    members: List[ObjectId] = Field(default_factory=list)
    content: List[ObjectId] = Field(default_factory=list)
