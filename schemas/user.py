"""User collection schema."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field
from .exercise import Exercise


class User(BaseModel):
    """User document with its embedded exercise log."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store-generated identifier")
    username: str = Field(..., description="Display name, not unique")
    log: List[Exercise] = Field(default_factory=list, description="Exercises in insertion order")


class UserSummary(BaseModel):
    """User as returned by the create and list endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(..., alias="_id")
