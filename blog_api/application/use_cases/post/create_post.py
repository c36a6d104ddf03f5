# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Post
from ....domain.exceptions import ValidationError
from ...dto.post_dto import PostCreateRequest, PostResponse
from ...dto.user_dto import CurrentUser
from .post_mapper import to_post_response

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a new post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, caller: CurrentUser, request: PostCreateRequest) -> PostResponse:
        """
        Create a post authored by the caller

        Args:
            caller: Authenticated caller identity
            request: Post creation request

        Returns:
            PostResponse for the new post (no likes yet)

        Raises:
            ValidationError: If title or content is missing or blank
        """
        if not (request.title or "").strip() or not (request.content or "").strip():
            raise ValidationError("Please provide title and content")

        new_post = Post(
            id=None,  # Will be set by repository
            title=request.title,
            content=request.content,
            author_id=caller.id,
            author_name=caller.username,
            liked_by=[],
        )

        saved_post = await self.post_repository.create(new_post)
        logger.info(f"User {caller.id} created post {saved_post.id}")

        return to_post_response(saved_post, caller.id)
