"""This file contains the post model for the application."""

from typing import Optional
from bson import ObjectId
from pydantic import BaseModel as PydanticBaseModel, Field

from app.models.base import BaseModel


class PostOptions(PydanticBaseModel):
    """Optional formatting for a post."""

    backgroundColor: Optional[str] = Field(None, description="Background color of the post")


class Post(BaseModel):
    """Post model: a message belonging to exactly one thread.

    Attributes:
        id: MongoDB ObjectId
        author: The user who wrote the post
        content: Body of the post
        thread: Id of the owning thread; never changes
        options: Optional formatting
    """

    author: ObjectId
    content: str
    thread: ObjectId
    options: Optional[PostOptions] = None
