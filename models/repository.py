"""User storage: a MongoDB-backed repository and an in-memory one.

Both expose the same coroutine interface so route handlers only depend on
whichever instance the application hands them.
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from schemas.exercise import Exercise
from schemas.user import User, UserSummary
from utils.errors import StoreFailure
from utils.logger import setup_logger

logger = setup_logger(__name__)


def user_from_document(document: Dict[str, Any]) -> User:
    """Convert a raw users-collection document to a ``User``."""
    return User(
        id=str(document["_id"]),
        username=document["username"],
        log=[Exercise(**entry) for entry in document.get("log", [])],
    )


def _object_id(user_id: str) -> Optional[ObjectId]:
    return ObjectId(user_id) if ObjectId.is_valid(user_id) else None


class MongoUserRepository:
    """Users stored as documents with the exercise log embedded."""

    def __init__(self, collection):
        self.collection = collection

    async def create(self, username: str) -> User:
        try:
            result = await self.collection.insert_one({"username": username, "log": []})
        except PyMongoError as e:
            logger.error(f"Error creating user: {e}", exc_info=True)
            raise StoreFailure(str(e)) from e
        return User(id=str(result.inserted_id), username=username, log=[])

    async def list_users(self) -> List[UserSummary]:
        try:
            cursor = self.collection.find({}, {"username": 1})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}", exc_info=True)
            raise StoreFailure(str(e)) from e
        return [UserSummary(id=str(d["_id"]), username=d["username"]) for d in documents]

    async def get(self, user_id: str) -> Optional[User]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        try:
            document = await self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Error fetching user {user_id}: {e}", exc_info=True)
            raise StoreFailure(str(e)) from e
        return user_from_document(document) if document else None

    async def append_exercise(self, user_id: str, exercise: Exercise) -> Optional[User]:
        """Push ``exercise`` to the end of the user's log.

        Returns the updated user, or ``None`` if no such user exists.
        """
        oid = _object_id(user_id)
        if oid is None:
            return None
        try:
            document = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$push": {"log": exercise.model_dump()}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error appending exercise for user {user_id}: {e}", exc_info=True)
            raise StoreFailure(str(e)) from e
        return user_from_document(document) if document else None


class InMemoryUserRepository:
    """Process-local user store for development and tests.

    Keeps documents in a dict in insertion order; nothing is persisted.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}

    async def create(self, username: str) -> User:
        user = User(id=str(ObjectId()), username=username, log=[])
        self._users[user.id] = user
        return user.model_copy(deep=True)

    async def list_users(self) -> List[UserSummary]:
        return [UserSummary(id=u.id, username=u.username) for u in self._users.values()]

    async def get(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy(deep=True) if user else None

    async def append_exercise(self, user_id: str, exercise: Exercise) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        user.log.append(exercise.model_copy())
        return user.model_copy(deep=True)
