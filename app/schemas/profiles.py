"""Profile schemas for request/response validation."""

from typing import List
from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    selectedChoices: List[str] = Field(..., description="Chosen answers to the profiling question")


class ProfileResponse(BaseModel):
    question: str
    selectedChoices: List[str] = Field(default_factory=list)


class ProfileQuestionResponse(BaseModel):
    question: str
    options: List[str]
