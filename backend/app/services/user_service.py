"""
User directory service: create, read, update and delete users by name.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from bson.errors import BSONError
from pymongo.errors import PyMongoError

from app.core.exceptions import (
    ForbiddenError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from app.core.validators import contains_hangul, is_valid_email, is_valid_field_name
from app.database.databases import users_db
from app.models.user import User, utc_now
from app.schemas.user import UserCreate, UserCreateResponse, MessageResponse

logger = logging.getLogger(__name__)

# Accounts younger than this cannot be deleted
MIN_ACCOUNT_AGE_FOR_DELETE = timedelta(minutes=1)

# Oldest document wins when several users share a name
FIRST_MATCH_SORT = [(users_db.Fields.ID, 1)]


class UserService:
    """Service for user directory operations."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize with the users collection and a clock returning aware UTC datetimes."""
        self.users = collection
        self.clock = clock

    # ==================== CRUD ====================

    async def create_user(self, request: UserCreate) -> UserCreateResponse:
        """
        Create a new user.

        Args:
            request: Create request with name and email

        Returns:
            UserCreateResponse with the store-assigned ID

        Raises:
            ValidationError: If a field is missing, the name contains
                Korean characters, or the email has no @
            StorageError: If the insert fails
        """
        if not request.name or not request.email:
            raise ValidationError("Missing name or email")

        if contains_hangul(request.name):
            raise ValidationError("Name cannot contain Korean characters")

        if not is_valid_email(request.email):
            raise ValidationError("Invalid email format: must contain @ symbol")

        user = User(name=request.name, email=request.email, created_at=self.clock())

        try:
            result = await self.users.insert_one(user.to_document())
        except PyMongoError as e:
            logger.exception("Failed to create user %r", request.name)
            raise StorageError(str(e)) from e

        user_id = str(result.inserted_id)
        logger.info("Created user %s (%r)", user_id, request.name)
        return UserCreateResponse(id=user_id, message="User created")

    async def get_user(self, name: Optional[str]) -> dict[str, Any]:
        """
        Get the first user with exactly this name.

        Returns:
            The stored document with ``_id`` exposed as a string ``id``

        Raises:
            ValidationError: If name is missing
            NotFoundError: If no user has this name
            StorageError: If the lookup fails
        """
        if not name:
            raise ValidationError("Missing user name in query")

        user_doc = await self._find_first_by_name(name)
        return self._doc_to_response(user_doc)

    async def update_user(
        self, name: Optional[str], fields: Optional[dict[str, Any]]
    ) -> MessageResponse:
        """
        Merge the given fields into the first user with this name.

        Only the listed fields change. An empty field set is accepted and
        performs no write.

        Raises:
            ValidationError: If name or fields are missing, a key is not a
                plain field name, an immutable field is targeted, the new
                email has no @, or a value cannot be encoded
            NotFoundError: If no user has this name
            StorageError: If the lookup or update fails
        """
        if not name or fields is None:
            raise ValidationError("Missing user name or update data")

        invalid = sorted(repr(key) for key in fields if not is_valid_field_name(key))
        if invalid:
            raise ValidationError(f"Invalid field name(s): {', '.join(invalid)}")

        immutable = sorted(users_db.IMMUTABLE_FIELDS.intersection(fields))
        if immutable:
            raise ValidationError(f"Cannot update immutable field(s): {', '.join(immutable)}")

        if users_db.Fields.EMAIL in fields and not is_valid_email(fields[users_db.Fields.EMAIL]):
            raise ValidationError("Invalid email format: must contain @ symbol")

        user_doc = await self._find_first_by_name(name)

        if fields:
            try:
                await self.users.update_one(
                    {users_db.Fields.ID: user_doc[users_db.Fields.ID]},
                    {"$set": fields},
                )
            except (BSONError, OverflowError) as e:
                # Client-side encoding failures: NUL bytes, integers over 64 bits
                logger.info("Rejected update for user %s: %s", user_doc[users_db.Fields.ID], e)
                raise ValidationError(f"Invalid update data: {e}") from e
            except PyMongoError as e:
                logger.exception("Failed to update user %s", user_doc[users_db.Fields.ID])
                raise StorageError(str(e)) from e

        logger.info(
            "Updated user %s (fields: %s)",
            user_doc[users_db.Fields.ID],
            ", ".join(sorted(fields)) or "none",
        )
        return MessageResponse(message="User updated successfully")

    async def delete_user(self, name: Optional[str]) -> MessageResponse:
        """
        Delete the first user with this name.

        Users created less than a minute ago cannot be deleted. Users
        without a creation timestamp are not subject to that guard.

        Raises:
            ValidationError: If name is missing
            NotFoundError: If no user has this name
            ForbiddenError: If the user is less than a minute old
            StorageError: If the lookup or delete fails
        """
        if not name:
            raise ValidationError("Missing user name in query")

        user_doc = await self._find_first_by_name(name)

        created_at = self._parse_timestamp(user_doc.get(users_db.Fields.CREATED_AT))
        if created_at is not None and self.clock() - created_at < MIN_ACCOUNT_AGE_FOR_DELETE:
            raise ForbiddenError("Cannot delete accounts less than 1 minute old")

        try:
            await self.users.delete_one({users_db.Fields.ID: user_doc[users_db.Fields.ID]})
        except PyMongoError as e:
            logger.exception("Failed to delete user %s", user_doc[users_db.Fields.ID])
            raise StorageError(str(e)) from e

        logger.info("Deleted user %s (%r)", user_doc[users_db.Fields.ID], name)
        return MessageResponse(message="User deleted successfully")

    # ==================== Helpers ====================

    async def _find_first_by_name(self, name: str) -> dict[str, Any]:
        """Exact, case-sensitive name lookup limited to one document."""
        try:
            user_doc = await self.users.find_one(
                {users_db.Fields.NAME: name},
                sort=FIRST_MATCH_SORT,
            )
        except PyMongoError as e:
            logger.exception("Failed to look up user %r", name)
            raise StorageError(str(e)) from e

        if not user_doc:
            raise NotFoundError()
        return user_doc

    @staticmethod
    def _parse_timestamp(value: Any) -> Optional[datetime]:
        """Normalize a stored timestamp to an aware UTC datetime."""
        if value is None:
            return None
        if isinstance(value, str):
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if value.tzinfo is None:
            # Naive datetimes from MongoDB are UTC
            value = value.replace(tzinfo=timezone.utc)
        return value

    @staticmethod
    def _doc_to_response(doc: dict[str, Any]) -> dict[str, Any]:
        """Convert a users document to its response form."""
        response = {"id": str(doc[users_db.Fields.ID])}
        response.update(
            (key, value) for key, value in doc.items() if key != users_db.Fields.ID
        )
        return response
