"""This file contains the schemas for the application."""
from app.schemas.common import MessageResponse
from app.schemas.threads import (
    ThreadCreate,
    ThreadDelete,
    ThreadTitleUpdate,
    ThreadResponse,
    ThreadCreateResponse,
)
from app.schemas.posts import PostCreate, PostUpdate, PostResponse, PostCreateResponse
from app.schemas.users import (
    UserCreate,
    LoginRequest,
    UsernameUpdate,
    PasswordUpdate,
    UserResponse,
    UserCreateResponse,
)
from app.schemas.profiles import ProfileUpdate, ProfileResponse, ProfileQuestionResponse

__all__ = [
    "MessageResponse",
    "ThreadCreate",
    "ThreadDelete",
    "ThreadTitleUpdate",
    "ThreadResponse",
    "ThreadCreateResponse",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "PostCreateResponse",
    "UserCreate",
    "LoginRequest",
    "UsernameUpdate",
    "PasswordUpdate",
    "UserResponse",
    "UserCreateResponse",
    "ProfileUpdate",
    "ProfileResponse",
    "ProfileQuestionResponse",
]
