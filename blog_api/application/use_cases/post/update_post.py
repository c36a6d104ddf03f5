# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import ForbiddenError, NotFoundError
from ...dto.post_dto import PostUpdateRequest, PostResponse
from .post_mapper import to_post_response

logger = logging.getLogger(__name__)


def _non_blank(value: Optional[str]) -> Optional[str]:
    """Return value if it carries text, None if absent or blank"""
    if value is None or not value.strip():
        return None
    return value


class UpdatePostUseCase:
    """
    Use case for editing a post (author only).

    Partial update: absent or blank fields keep their current value, so a
    field can never be cleared through this operation. An update with both
    fields blank succeeds and returns the post unchanged.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, caller_id: str, post_id: str, request: PostUpdateRequest) -> PostResponse:
        """
        Update title and/or content of a post

        Raises:
            NotFoundError: If no post has this ID
            ForbiddenError: If the caller is not the post's author
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError()

        if not post.is_authored_by(caller_id):
            logger.warning(f"User {caller_id} attempted to edit post {post_id} owned by {post.author_id}")
            raise ForbiddenError("You can only edit your own blogs")

        title = _non_blank(request.title)
        if title is not None:
            title = title.strip()
        content = _non_blank(request.content)
        if title is None and content is None:
            return to_post_response(post, caller_id)

        updated_post = await self.post_repository.update_content(
            post_id=post_id,
            author_id=caller_id,
            title=title,
            content=content,
        )
        if updated_post is None:
            # Deleted between the ownership check and the write
            raise NotFoundError()

        logger.info(f"User {caller_id} updated post {post_id}")
        return to_post_response(updated_post, caller_id)
