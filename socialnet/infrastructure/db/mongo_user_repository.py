# Standard library imports
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClientSession, AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateEmailError, RepositoryError, UserNotFoundError
from .mongo_connection import get_user_collection


def _to_object_id(user_id: Optional[str]) -> Optional[ObjectId]:
    if not user_id:
        return None
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(
        self,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        use_transactions: bool = False,
    ) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.use_transactions = use_transactions

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except Exception as e:
            raise RepositoryError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (also for malformed ids)
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RepositoryError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID and timestamps set

        Raises:
            DuplicateEmailError: If another user already holds the email
            UserNotFoundError: If an update targets a missing user
        """
        if not user:
            raise ValueError("User cannot be None")

        if user.id:
            return await self._update(user)
        return await self._insert(user)

    async def save_all(self, users: List[User]) -> List[User]:
        """
        Save several existing users.

        With transactions enabled every update commits or none does;
        otherwise the updates run one after another and a failure leaves
        the earlier ones in place.
        """
        if not self.use_transactions:
            return [await self._update(user) for user in users]

        client = self.user_collection.database.client
        try:
            async with await client.start_session() as session:
                async with session.start_transaction():
                    return [await self._update(user, session=session) for user in users]
        except (DuplicateEmailError, UserNotFoundError, RepositoryError):
            raise
        except Exception as e:
            raise RepositoryError(f"Error saving users in transaction: {str(e)}")

    async def _insert(self, user: User) -> User:
        now = datetime.now(timezone.utc)
        user_dict = self._user_to_dict(user)
        user_dict[UserFields.CREATED_AT] = now
        user_dict[UserFields.UPDATED_AT] = now

        try:
            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except DuplicateKeyError as e:
            raise self._translate_duplicate(e, user)
        except Exception as e:
            raise RepositoryError(f"Error saving user: {str(e)}")

        if new_document is None:
            raise RepositoryError("User was created but could not be retrieved")
        return self._document_to_user(new_document)

    async def _update(self, user: User, session: Optional[AsyncIOMotorClientSession] = None) -> User:
        object_id = _to_object_id(user.id)
        if object_id is None:
            raise UserNotFoundError(user.id or "")

        user_dict = self._user_to_dict(user)
        user_dict[UserFields.UPDATED_AT] = datetime.now(timezone.utc)

        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": user_dict},
                session=session,
            )
            if update_result.matched_count == 0:
                raise UserNotFoundError(user.id)

            updated_document = await self.user_collection.find_one(
                {UserFields.MONGO_ID: object_id},
                session=session,
            )
        except UserNotFoundError:
            raise
        except DuplicateKeyError as e:
            raise self._translate_duplicate(e, user)
        except Exception as e:
            raise RepositoryError(f"Error saving user: {str(e)}")

        if updated_document is None:
            raise RepositoryError(f"User {user.id} was updated but could not be retrieved")
        return self._document_to_user(updated_document)

    @staticmethod
    def _translate_duplicate(error: DuplicateKeyError, user: User) -> Exception:
        key_pattern = (error.details or {}).get("keyPattern") or {}
        if UserFields.EMAIL in key_pattern:
            return DuplicateEmailError(user.email)
        return RepositoryError(f"Error saving user: {str(error)}")

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            location=document.get(UserFields.LOCATION, ""),
            occupation=document.get(UserFields.OCCUPATION, ""),
            picture_path=document.get(UserFields.PICTURE_PATH) or "",
            friends=[str(friend_id) for friend_id in document.get(UserFields.FRIENDS) or []],
            viewed_profile=document.get(UserFields.VIEWED_PROFILE) or 0,
            impressions=document.get(UserFields.IMPRESSIONS) or 0,
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )

    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document (without _id and timestamps)

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.PICTURE_PATH: user.picture_path,
            UserFields.FRIENDS: list(user.friends),
            UserFields.LOCATION: user.location,
            UserFields.OCCUPATION: user.occupation,
            UserFields.VIEWED_PROFILE: user.viewed_profile,
            UserFields.IMPRESSIONS: user.impressions,
        }
