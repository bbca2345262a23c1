"""User and session schemas for request/response validation."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for signing up, optionally answering the profiling question."""

    username: str = Field(..., min_length=1, description="Unique username")
    password: str = Field(..., min_length=1, description="Plain text password")
    profileResponses: Optional[List[str]] = Field(None, description="Answers to the profiling question")


class LoginRequest(BaseModel):
    username: str
    password: str


class UsernameUpdate(BaseModel):
    username: str = Field(..., min_length=1)


class PasswordUpdate(BaseModel):
    currentPassword: str
    newPassword: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Schema for user response; the password hash is never returned."""

    id: str = Field(..., alias="_id", description="MongoDB ObjectId")
    username: str
    created_at: Optional[datetime] = Field(None, description="Timestamp when the user signed up")

    class Config:
        """Pydantic config."""
        populate_by_name = True


class UserCreateResponse(BaseModel):
    msg: str
    user: UserResponse
