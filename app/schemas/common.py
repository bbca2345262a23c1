"""Schemas shared by several routes."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by mutating routes."""

    msg: str = Field(..., description="Human readable outcome")
