"""Exercise schemas: the stored entry and its output forms."""

from datetime import datetime
from typing import List, Union
from pydantic import BaseModel, ConfigDict, Field


class Exercise(BaseModel):
    """Exercise entry embedded in a user's log."""
    description: str = Field(..., description="What was done")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: datetime = Field(..., description="When it was done (naive UTC)")


class LogEntry(BaseModel):
    """Exercise as returned by the log endpoint."""
    description: str
    duration: Union[int, float]
    date: str = Field(..., description="Calendar date, e.g. 'Sun Jan 01 2023'")


class ExerciseResponse(BaseModel):
    """Response for a newly appended exercise."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    description: str
    duration: Union[int, float]
    date: str
    id: str = Field(..., alias="_id")


class LogResponse(BaseModel):
    """Filtered view of a user's exercise log."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    count: int
    id: str = Field(..., alias="_id")
    log: List[LogEntry] = Field(default_factory=list)
