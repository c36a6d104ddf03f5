# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from .post_mapper import to_post_response


class ListPostsUseCase:
    """Use case for listing all posts, newest first"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, caller_id: Optional[str] = None) -> List[PostResponse]:
        """
        List every post annotated with the caller's like state

        Args:
            caller_id: ID of the requesting user, None for anonymous callers

        Returns:
            List of PostResponse objects ordered by creation time, newest first
        """
        posts = await self.post_repository.list_all()
        return [to_post_response(post, caller_id) for post in posts]
