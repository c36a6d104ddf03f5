# Standard library imports
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields
from ...domain.exceptions import InternalError
from .mongo_connection import get_post_collection


def _to_object_id(post_id: str) -> Optional[ObjectId]:
    if not post_id:
        return None
    try:
        return ObjectId(post_id)
    except (InvalidId, ValueError, TypeError):
        return None


def toggle_like_pipeline(user_id: str) -> List[Dict[str, Any]]:
    """
    Build the update pipeline that flips user_id's membership in liked_by

    Runs server-side as one document update, so two concurrent toggles on
    the same post never overwrite each other.
    """
    liked_by = {"$ifNull": [f"${PostFields.LIKED_BY}", []]}
    return [
        {
            "$set": {
                PostFields.LIKED_BY: {
                    "$cond": [
                        {"$in": [user_id, liked_by]},
                        {"$filter": {"input": liked_by, "cond": {"$ne": ["$$this", user_id]}}},
                        {"$concatArrays": [liked_by, [user_id]]},
                    ]
                }
            }
        }
    ]


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def list_all(self) -> List[Post]:
        try:
            cursor = self.post_collection.find({}).sort(
                [(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, DESCENDING)]
            )
            posts: List[Post] = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except PyMongoError as e:
            raise InternalError(f"Error listing posts: {str(e)}")

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """
        Find post by ID

        Args:
            post_id: Post ID to search for

        Returns:
            Post domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise InternalError(f"Error finding post by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_post(document)

    async def create(self, post: Post) -> Post:
        """
        Insert a new post

        Args:
            post: Post domain model to insert (its ID is ignored)

        Returns:
            Saved Post domain model with ID and timestamps set
        """
        if not post:
            raise ValueError("Post cannot be None")

        now = datetime.now(timezone.utc)
        post_dict = self._post_to_dict(post)
        post_dict[PostFields.CREATED_AT] = now
        post_dict[PostFields.UPDATED_AT] = now

        try:
            result = await self.post_collection.insert_one(post_dict)
            new_document = await self.post_collection.find_one({PostFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            raise InternalError(f"Error saving post: {str(e)}")

        if new_document is None:
            raise InternalError("Post was created but could not be retrieved")
        return self._document_to_post(new_document)

    async def update_content(
        self,
        post_id: str,
        author_id: str,
        title: Optional[str],
        content: Optional[str],
    ) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        changes: Dict[str, Any] = {PostFields.UPDATED_AT: datetime.now(timezone.utc)}
        if title is not None:
            changes[PostFields.TITLE] = title
        if content is not None:
            changes[PostFields.CONTENT] = content

        try:
            document = await self.post_collection.find_one_and_update(
                {PostFields.MONGO_ID: object_id, PostFields.AUTHOR_ID: author_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise InternalError(f"Error updating post: {str(e)}")
        if document is None:
            return None
        return self._document_to_post(document)

    async def delete(self, post_id: str, author_id: str) -> bool:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False

        try:
            result = await self.post_collection.delete_one(
                {PostFields.MONGO_ID: object_id, PostFields.AUTHOR_ID: author_id}
            )
        except PyMongoError as e:
            raise InternalError(f"Error deleting post: {str(e)}")
        return result.deleted_count == 1

    async def toggle_like(self, post_id: str, user_id: str) -> Optional[Post]:
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None

        try:
            document = await self.post_collection.find_one_and_update(
                {PostFields.MONGO_ID: object_id},
                toggle_like_pipeline(user_id),
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise InternalError(f"Error toggling like: {str(e)}")
        if document is None:
            return None
        return self._document_to_post(document)

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        """
        Convert MongoDB document to Post domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Post domain model
        """
        if not document or PostFields.MONGO_ID not in document:
            raise InternalError("Invalid post document: missing _id field")

        return Post(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE, ""),
            content=document.get(PostFields.CONTENT, ""),
            author_id=str(document.get(PostFields.AUTHOR_ID, "")),
            author_name=document.get(PostFields.AUTHOR_NAME, ""),
            liked_by=[str(user_id) for user_id in document.get(PostFields.LIKED_BY) or []],
            created_at=document.get(PostFields.CREATED_AT),
            updated_at=document.get(PostFields.UPDATED_AT),
        )

    def _post_to_dict(self, post: Post) -> Dict[str, Any]:
        """
        Convert Post domain model to MongoDB document (without _id)

        Args:
            post: Post domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.AUTHOR_ID: post.author_id,
            PostFields.AUTHOR_NAME: post.author_name,
            PostFields.LIKED_BY: list(post.liked_by),
        }
