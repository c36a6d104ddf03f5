# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for permanently deleting a post (author only)"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, caller_id: str, post_id: str) -> None:
        """
        Delete a post; its likes disappear with it

        Raises:
            NotFoundError: If no post has this ID
            ForbiddenError: If the caller is not the post's author
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError()

        if not post.is_authored_by(caller_id):
            logger.warning(f"User {caller_id} attempted to delete post {post_id} owned by {post.author_id}")
            raise ForbiddenError("You can only delete your own blogs")

        deleted = await self.post_repository.delete(post_id=post_id, author_id=caller_id)
        if not deleted:
            raise NotFoundError()

        logger.info(f"User {caller_id} deleted post {post_id}")
