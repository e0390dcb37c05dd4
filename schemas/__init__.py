"""Request and response schemas."""

from schemas.exercise import Exercise, ExerciseResponse, LogEntry, LogResponse
from schemas.user import User, UserSummary

__all__ = [
    "Exercise",
    "ExerciseResponse",
    "LogEntry",
    "LogResponse",
    "User",
    "UserSummary",
]
