# Standard library imports
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields
from ...domain.exceptions import RepositoryError
from .mongo_connection import get_post_collection


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        if not post_id:
            return None
        try:
            object_id = ObjectId(post_id)
        except (InvalidId, TypeError):
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except Exception as e:
            raise RepositoryError(f"Error finding post by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_post(document)

    async def find_by_user(self, user_id: str) -> List[Post]:
        """
        Find all posts written by a user

        Args:
            user_id: The author's user ID

        Returns:
            List of Post domain models, newest first
        """
        if not user_id:
            return []

        try:
            cursor = self.post_collection.find({PostFields.USER_ID: user_id}).sort(PostFields.CREATED_AT, -1)
            posts = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except Exception as e:
            raise RepositoryError(f"Error listing posts for user: {str(e)}")

    async def save(self, post: Post) -> Post:
        """
        Save post (create new or update existing)

        Args:
            post: Post domain model to save

        Returns:
            Saved Post domain model with ID and timestamps set
        """
        if not post:
            raise ValueError("Post cannot be None")

        now = datetime.now(timezone.utc)
        post_dict = self._post_to_dict(post)
        post_dict[PostFields.UPDATED_AT] = now

        try:
            if post.id:
                object_id = ObjectId(post.id)
                update_result = await self.post_collection.update_one(
                    {PostFields.MONGO_ID: object_id},
                    {"$set": post_dict},
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"Post with ID {post.id} not found")
            else:
                post_dict[PostFields.CREATED_AT] = now
                result = await self.post_collection.insert_one(post_dict)
                object_id = result.inserted_id

            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except InvalidId:
            raise ValueError(f"Invalid post ID format: {post.id}")
        except ValueError:
            raise
        except Exception as e:
            raise RepositoryError(f"Error saving post: {str(e)}")

        if document is None:
            raise RepositoryError("Post was saved but could not be retrieved")
        return self._document_to_post(document)

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        if not document or PostFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            user_id=document.get(PostFields.USER_ID, ""),
            first_name=document.get(PostFields.FIRST_NAME, ""),
            last_name=document.get(PostFields.LAST_NAME, ""),
            location=document.get(PostFields.LOCATION),
            description=document.get(PostFields.DESCRIPTION),
            picture_path=document.get(PostFields.PICTURE_PATH),
            user_picture_path=document.get(PostFields.USER_PICTURE_PATH),
            likes=dict(document.get(PostFields.LIKES) or {}),
            comments=list(document.get(PostFields.COMMENTS) or []),
            created_at=document.get(PostFields.CREATED_AT),
            updated_at=document.get(PostFields.UPDATED_AT),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        return {
            PostFields.USER_ID: post.user_id,
            PostFields.FIRST_NAME: post.first_name,
            PostFields.LAST_NAME: post.last_name,
            PostFields.LOCATION: post.location,
            PostFields.DESCRIPTION: post.description,
            PostFields.PICTURE_PATH: post.picture_path,
            PostFields.USER_PICTURE_PATH: post.user_picture_path,
            PostFields.LIKES: dict(post.likes),
            PostFields.COMMENTS: list(post.comments),
        }
