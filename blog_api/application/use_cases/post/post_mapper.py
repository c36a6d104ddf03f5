# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.post import Post
from ...dto.post_dto import PostResponse


def to_post_response(post: Post, caller_id: Optional[str]) -> PostResponse:
    """
    Project a Post into its response DTO, annotated for the given caller

    Args:
        post: Post domain model
        caller_id: ID of the requesting user, None for anonymous callers

    Returns:
        PostResponse with like_count and liked_by_caller computed
    """
    return PostResponse(
        id=post.id or "",
        title=post.title,
        content=post.content,
        author_id=post.author_id,
        author_name=post.author_name,
        like_count=post.like_count,
        liked_by_caller=post.is_liked_by(caller_id),
        created_at=post.created_at,
        updated_at=post.updated_at,
    )
