from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.post import Post


class PostRepository(ABC):
    """
    Repository interface - defines contract for post data access.

    Mutations are single atomic store operations keyed by post ID, so
    concurrent requests on the same post cannot lose each other's writes.
    """

    @abstractmethod
    async def list_all(self) -> List[Post]:
        """Return every post, newest created first"""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID (None for unknown or malformed IDs)"""
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post and return it with ID and timestamps set"""
        pass

    @abstractmethod
    async def update_content(
        self,
        post_id: str,
        author_id: str,
        title: Optional[str],
        content: Optional[str],
    ) -> Optional[Post]:
        """
        Set title and/or content if the post exists and belongs to author_id.

        Fields passed as None are left untouched. Returns the updated post,
        or None when no post matched.
        """
        pass

    @abstractmethod
    async def delete(self, post_id: str, author_id: str) -> bool:
        """Delete the post if it belongs to author_id; True if a post was removed"""
        pass

    @abstractmethod
    async def toggle_like(self, post_id: str, user_id: str) -> Optional[Post]:
        """
        Add user_id to the post's likes if absent, remove it if present.

        Returns the post as it is after the toggle, or None if no post matched.
        """
        pass
