"""FastAPI dependencies handed to the route handlers."""

from datetime import datetime
from typing import Annotated

from fastapi import Depends, Request

from utils.helpers import utc_now


def get_user_repository(request: Request):
    """Return the user repository opened by the application lifespan."""
    return request.app.state.user_repository


def get_now() -> datetime:
    """Current time used as the default exercise date."""
    return utc_now()


UserRepositoryDep = Annotated[object, Depends(get_user_repository)]
NowDep = Annotated[datetime, Depends(get_now)]
