"""This file contains the user model for the application."""

from pydantic import Field
import bcrypt

from app.models.base import BaseModel


class User(BaseModel):
    """User model for storing user accounts.

    Attributes:
        id: MongoDB ObjectId
        username: Unique username
        password: Bcrypt hashed password
        created_at: When the user was created
    """

    username: str = Field(..., min_length=1)
    password: str

    def verify_password(self, password: str) -> bool:
        """Verify if the provided password matches the hash."""
        return bcrypt.checkpw(password.encode("utf-8"), self.password.encode("utf-8"))

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
