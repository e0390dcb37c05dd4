"""User and exercise log routes."""

from typing import List, Optional
from fastapi import APIRouter, Query, Request
from api.dependencies import NowDep, UserRepositoryDep
from schemas.exercise import ExerciseResponse, LogResponse
from schemas.user import UserSummary
from services import tracker_service
from utils.helpers import read_payload
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserSummary)
async def create_user(request: Request, repository: UserRepositoryDep):
    """Create a user from the ``username`` form or JSON field."""
    raw = await read_payload(request)
    return await tracker_service.create_user(repository, raw)


@router.get("", response_model=List[UserSummary])
async def list_users(repository: UserRepositoryDep):
    """List every user as ``{username, _id}``."""
    return await tracker_service.list_users(repository)


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    request: Request,
    repository: UserRepositoryDep,
    now: NowDep,
):
    """Append an exercise to a user's log.

    ``date`` is optional; when absent or unreadable the exercise is dated now.
    """
    raw = await read_payload(request)
    return await tracker_service.add_exercise(repository, user_id, raw, now)


@router.get("/{user_id}/logs", response_model=LogResponse)
async def get_logs(
    user_id: str,
    repository: UserRepositoryDep,
    from_: Optional[str] = Query(None, alias="from", description="Earliest date, inclusive"),
    to: Optional[str] = Query(None, description="Latest date, inclusive"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
):
    """Return the user's exercise log, oldest first."""
    return await tracker_service.get_log(repository, user_id, from_, to, limit)
