"""Tracker operations: users, exercise appends and log queries.

Each function takes the user repository explicitly, and the append takes the
current time, so none of them depends on module-level state.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional

from schemas.exercise import Exercise, ExerciseResponse, LogResponse
from schemas.user import UserSummary
from services.log_query import build_log, format_date
from services.validation import validate_exercise, validate_username
from utils.errors import NotFound
from utils.logger import setup_logger

logger = setup_logger(__name__)

USER_NOT_FOUND = "user not found"


async def create_user(repository, raw: Mapping[str, Any]) -> UserSummary:
    """Create a user from a raw payload holding ``username``."""
    username = validate_username(raw.get("username"))
    user = await repository.create(username)
    logger.info(f"Created user {user.id}")
    return UserSummary(id=user.id, username=user.username)


async def list_users(repository) -> List[UserSummary]:
    return await repository.list_users()


async def add_exercise(
    repository,
    user_id: str,
    raw: Mapping[str, Any],
    now: datetime,
) -> ExerciseResponse:
    """Validate ``raw`` and append it to the user's log.

    Input is validated before the user is looked up, so a bad payload for an
    unknown user reports the payload error.
    """
    new = validate_exercise(raw, now)
    exercise = Exercise(description=new.description, duration=new.duration, date=new.date)

    user = await repository.append_exercise(user_id, exercise)
    if user is None:
        logger.warning(f"Exercise for unknown user {user_id}")
        raise NotFound(USER_NOT_FOUND)

    logger.info(f"Added exercise for user {user.id} ({len(user.log)} in log)")
    return ExerciseResponse(
        id=user.id,
        username=user.username,
        description=exercise.description,
        duration=exercise.duration,
        date=format_date(exercise.date),
    )


async def get_log(
    repository,
    user_id: str,
    from_: Optional[str] = None,
    to: Optional[str] = None,
    limit: Optional[str] = None,
) -> LogResponse:
    """Return the user's log filtered by ``from``/``to`` and truncated to ``limit``."""
    user = await repository.get(user_id)
    if user is None:
        logger.warning(f"Log requested for unknown user {user_id}")
        raise NotFound(USER_NOT_FOUND)
    return build_log(user, from_, to, limit)
