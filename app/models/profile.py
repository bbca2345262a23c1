"""This file contains the profile record model for the application."""

from typing import List
from bson import ObjectId
from pydantic import Field

from app.models.base import BaseModel


class ProfileRecord(BaseModel):
    """A user's answer to one profiling question."""

    user: ObjectId
    question: str
    selectedChoices: List[str] = Field(default_factory=list)
