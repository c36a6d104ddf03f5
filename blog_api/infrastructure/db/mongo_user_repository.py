# Standard library imports
from datetime import datetime, timezone
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import BlogAppError, DuplicateEmailError, DuplicateUsernameError, InternalError
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (matched case-insensitively)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        return await self._find_one({UserFields.EMAIL: email.strip().lower()}, "email")

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        return await self._find_one({UserFields.USERNAME: username.strip()}, "username")

    async def create(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to insert (its ID is ignored)

        Returns:
            Saved User domain model with ID and timestamps set

        Raises:
            DuplicateUsernameError / DuplicateEmailError: On unique index violation
        """
        if not user:
            raise ValueError("User cannot be None")

        now = datetime.now(timezone.utc)
        user_dict = self._user_to_dict(user)
        user_dict[UserFields.CREATED_AT] = now
        user_dict[UserFields.UPDATED_AT] = now

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise self._duplicate_error(e)
        except PyMongoError as e:
            raise InternalError(f"Error saving user: {str(e)}")

        new_document = await self._find_one({UserFields.MONGO_ID: result.inserted_id}, "ID")
        if new_document is None:
            raise InternalError("User was created but could not be retrieved")
        return new_document

    async def _find_one(self, query: dict, description: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            raise InternalError(f"Error finding user by {description}: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    @staticmethod
    def _duplicate_error(error: DuplicateKeyError) -> BlogAppError:
        """Map a unique index violation to the matching domain error"""
        details = error.details or {}
        key_pattern = details.get("keyPattern") or details.get("keyValue") or {}
        if UserFields.USERNAME in key_pattern:
            return DuplicateUsernameError()
        if UserFields.EMAIL in key_pattern:
            return DuplicateEmailError()
        # Older servers only report the index name in the message
        if f"{UserFields.USERNAME}_" in str(error):
            return DuplicateUsernameError()
        return DuplicateEmailError()

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise InternalError("Invalid user document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
        }
