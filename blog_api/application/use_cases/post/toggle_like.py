# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import NotFoundError
from ...dto.post_dto import PostResponse
from .post_mapper import to_post_response


class ToggleLikeUseCase:
    """Use case for liking or unliking a post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, caller_id: str, post_id: str) -> PostResponse:
        """
        Like the post if the caller has not liked it yet, unlike it otherwise

        Returns:
            PostResponse whose liked_by_caller reflects the state after the toggle

        Raises:
            NotFoundError: If no post has this ID
        """
        post = await self.post_repository.toggle_like(post_id=post_id, user_id=caller_id)
        if post is None:
            raise NotFoundError()
        return to_post_response(post, caller_id)
