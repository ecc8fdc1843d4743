# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import PersistenceError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields, UserRoles
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _parse_object_id(user_id: Optional[str]) -> Optional[ObjectId]:
    if not user_id:
        return None
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """
    Scanner accounts in the users collection.

    Emails are stored lowercased so lookups are case-insensitive. Driver
    failures surface as PersistenceError.
    """

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        return await self._find_one({UserFields.EMAIL: email.strip().lower()})

    async def find_by_id(self, user_id: str) -> Optional[User]:
        object_id = _parse_object_id(user_id)
        if object_id is None:
            return None
        return await self._find_one({UserFields.MONGO_ID: object_id})

    async def save(self, user: User) -> User:
        """
        Store an account.

        Args:
            user: Account to store; without an ID it is inserted, otherwise
                the existing document is overwritten (e.g. on verification)

        Returns:
            The stored account as read back from the database

        Raises:
            ValueError: If the ID is malformed or no such account exists
            PersistenceError: If the database call fails
        """
        fields = self._user_to_document(user)

        if user.id:
            object_id = _parse_object_id(user.id)
            if object_id is None:
                raise ValueError(f"Invalid user ID format: {user.id}")
            try:
                document = await self.user_collection.find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": fields},
                    return_document=ReturnDocument.AFTER,
                )
            except PyMongoError as e:
                raise PersistenceError(f"Failed to update user {user.id}: {e}") from e
            if document is None:
                raise ValueError(f"User with ID {user.id} not found")
            return self._document_to_user(document)

        fields.setdefault(UserFields.CREATED_AT, utc_now())
        try:
            result = await self.user_collection.insert_one(fields)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to create user {user.email}: {e}") from e

        logger.info(f"Registered user {fields[UserFields.EMAIL]}")
        return self._document_to_user({**fields, UserFields.MONGO_ID: result.inserted_id})

    async def _find_one(self, query: Dict[str, Any]) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            raise PersistenceError(f"User lookup failed: {e}") from e
        return self._document_to_user(document) if document is not None else None

    @staticmethod
    def _document_to_user(document: Dict[str, Any]) -> User:
        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            full_name=document.get(UserFields.FULL_NAME),
            is_verified=bool(document.get(UserFields.IS_VERIFIED, False)),
            role=document.get(UserFields.ROLE) or UserRoles.USER,
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
        )

    @staticmethod
    def _user_to_document(user: User) -> Dict[str, Any]:
        document = {
            UserFields.EMAIL: user.email.strip().lower(),
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.FULL_NAME: user.full_name,
            UserFields.IS_VERIFIED: user.is_verified,
            UserFields.ROLE: user.role,
        }
        if user.created_at is not None:
            document[UserFields.CREATED_AT] = user.created_at
        return document
