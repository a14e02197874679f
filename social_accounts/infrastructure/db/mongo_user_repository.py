# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import Binary, ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.config import get_settings
from ...core.exceptions import (
    AccountError,
    DuplicateEmailError,
    HashingFailure,
    InvalidCredential,
    UserNotFoundError,
    UserValidationError,
)
from ...domain.repositories.user_repository import PersistResult, UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.services.credential_manager import CredentialManager
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _to_object_id(user_id: str) -> ObjectId:
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        raise ValueError(f"Invalid user ID format: {user_id}")


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(
        self,
        credential_manager: CredentialManager,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        name_max_length: Optional[int] = None,
    ) -> None:
        self.credential_manager = credential_manager
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.name_max_length = (
            name_max_length if name_max_length is not None else get_settings().name_max_length
        )

    async def ensure_indexes(self) -> None:
        """Create the unique index backing email uniqueness"""
        await self.user_collection.create_index(UserFields.EMAIL, unique=True)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (surrounding whitespace ignored)

        Returns:
            User domain model if found, None otherwise
        """
        if not email or not email.strip():
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email.strip()})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_user(document)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

    def validate(self, user: User) -> None:
        """
        Validate user before a write (phase one)

        Profile fields and password rules are all checked so every problem is
        reported at once. Nothing on the record changes.

        Raises:
            InvalidCredential: If the password rules fail (other field errors included)
            UserValidationError: If only profile fields are invalid
        """
        if not user:
            raise ValueError("User cannot be None")

        field_errors = user.validate_fields(self.name_max_length)
        password_errors = self.credential_manager.password_errors(user, user.is_new)

        if password_errors:
            raise InvalidCredential(password_errors, field_errors=field_errors)
        if field_errors:
            raise UserValidationError(field_errors)

    async def commit(self, user: User) -> PersistResult:
        """
        Hash any pending password, then write the user (phase two)

        If the write fails, the record's hash and pending password are put
        back so the same instance can be saved again.

        Args:
            user: User that already passed validate()

        Returns:
            PersistResult with the saved user (ID set on create)

        Raises:
            HashingFailure: If hashing fails; nothing is written
        """
        if not user:
            raise ValueError("User cannot be None")

        is_new = user.is_new
        previous_hash = user.hashed_password
        previous_pending = user.pending_password

        try:
            password_updated = await self.credential_manager.encrypt_before_persist(user)
        except HashingFailure as e:
            logger.error(f"Aborting save of user {user.email}: {e}")
            raise

        try:
            if is_new:
                await self._insert(user)
            else:
                await self._update(user)
        except Exception:
            user.hashed_password = previous_hash
            user.set_password(previous_pending)
            raise

        logger.info(
            f"{'Created' if is_new else 'Updated'} user {user.id}"
            f"{' (password changed)' if password_updated and not is_new else ''}"
        )
        return PersistResult(user=user, created=is_new, password_updated=password_updated)

    async def save(self, user: User) -> PersistResult:
        """
        Save user (create new or update existing)

        Runs validate() then commit() while holding the record's persist lock.

        Args:
            user: User domain model to save

        Returns:
            PersistResult describing the write
        """
        if not user:
            raise ValueError("User cannot be None")

        async with user.persist_lock:
            self.validate(user)
            return await self.commit(user)

    async def delete(self, user_id: str) -> bool:
        """
        Delete user and drop it from other users' follow lists

        Args:
            user_id: ID of the user to delete

        Returns:
            True if a document was deleted
        """
        object_id = _to_object_id(user_id)

        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
            if result.deleted_count == 0:
                return False
            await self.user_collection.update_many(
                {},
                {"$pull": {UserFields.FOLLOWING: object_id, UserFields.FOLLOWERS: object_id}},
            )
            return True
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")

    async def follow(self, user_id: str, target_id: str) -> None:
        """
        Add target_id to user's following and user_id to target's followers

        Raises:
            UserNotFoundError: If either user does not exist
        """
        await self._update_relation("$addToSet", user_id, target_id)

    async def unfollow(self, user_id: str, target_id: str) -> None:
        """
        Remove the follow relation on both sides

        Raises:
            UserNotFoundError: If either user does not exist
        """
        await self._update_relation("$pull", user_id, target_id)

    async def _update_relation(self, operator: str, user_id: str, target_id: str) -> None:
        user_oid = _to_object_id(user_id)
        target_oid = _to_object_id(target_id)

        try:
            result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: user_oid},
                {operator: {UserFields.FOLLOWING: target_oid}},
            )
            if result.matched_count == 0:
                raise UserNotFoundError(user_id)

            result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: target_oid},
                {operator: {UserFields.FOLLOWERS: user_oid}},
            )
            if result.matched_count == 0:
                raise UserNotFoundError(target_id)
        except AccountError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error updating follow relation: {str(e)}")

    async def _insert(self, user: User) -> None:
        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            raise DuplicateEmailError(user.email)
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")
        user.id = str(result.inserted_id)

    async def _update(self, user: User) -> None:
        object_id = _to_object_id(user.id)
        user_dict = self._user_to_dict(user)
        # The social graph only changes through follow()/unfollow()
        del user_dict[UserFields.FOLLOWING]
        del user_dict[UserFields.FOLLOWERS]
        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": user_dict},
            )
        except DuplicateKeyError:
            raise DuplicateEmailError(user.email)
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

        if update_result.matched_count == 0:
            raise UserNotFoundError(user.id)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        photo = document.get(UserFields.PHOTO) or {}
        photo_data = photo.get(UserFields.PHOTO_DATA)

        user = User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            name=document.get(UserFields.NAME, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD) or "",
            about=document.get(UserFields.ABOUT),
            photo=bytes(photo_data) if photo_data is not None else None,
            photo_content_type=photo.get(UserFields.PHOTO_CONTENT_TYPE),
            updated=document.get(UserFields.UPDATED),
            following=[str(ref) for ref in document.get(UserFields.FOLLOWING, [])],
            followers=[str(ref) for ref in document.get(UserFields.FOLLOWERS, [])],
        )
        if document.get(UserFields.CREATED) is not None:
            user.created = document[UserFields.CREATED]
        return user

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Only stored fields are written; the pending plaintext password never
        reaches the document. _id is left out (set by insert, matched on update).

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = {
            UserFields.EMAIL: user.email,
            UserFields.NAME: user.name,
            UserFields.ABOUT: user.about,
            UserFields.CREATED: user.created,
            UserFields.UPDATED: user.updated,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.FOLLOWING: [_to_object_id(ref) for ref in user.following],
            UserFields.FOLLOWERS: [_to_object_id(ref) for ref in user.followers],
        }

        if user.photo:
            user_dict[UserFields.PHOTO] = {
                UserFields.PHOTO_DATA: Binary(user.photo),
                UserFields.PHOTO_CONTENT_TYPE: user.photo_content_type,
            }
        else:
            user_dict[UserFields.PHOTO] = None

        return user_dict
