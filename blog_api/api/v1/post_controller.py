# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.post_dto import (
    MessageResponse,
    PostCreateRequest,
    PostResponse,
    PostUpdateRequest,
)
from ...application.dto.user_dto import CurrentUser
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...application.use_cases.post.toggle_like import ToggleLikeUseCase
from ...di.container import get_container
from .dependencies import get_current_user, get_optional_user


router = APIRouter(tags=["blogs"])


@router.get("", response_model=List[PostResponse])
async def list_posts(
    current_user: Optional[CurrentUser] = Depends(get_optional_user),
) -> List[PostResponse]:
    """
    List all posts, newest first

    Public; when a valid token is presented each post's liked_by_caller
    reflects the caller, otherwise it is false.
    """
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)
    return await list_posts_use_case.execute(caller_id=current_user.id if current_user else None)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
) -> PostResponse:
    """
    Create a new post authored by the current user

    Args:
        request: Post creation request
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)
    return await create_post_use_case.execute(caller=current_user, request=request)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: PostUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
) -> PostResponse:
    """Update a post's title and/or content (author only)"""
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)
    return await update_post_use_case.execute(
        caller_id=current_user.id,
        post_id=post_id,
        request=request,
    )


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    current_user: CurrentUser = Depends(get_current_user),
) -> MessageResponse:
    """Delete a post (author only)"""
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)
    await delete_post_use_case.execute(caller_id=current_user.id, post_id=post_id)
    return MessageResponse(message="Blog deleted successfully")


@router.post("/{post_id}/like", response_model=PostResponse)
async def toggle_like(
    post_id: str,
    current_user: CurrentUser = Depends(get_current_user),
) -> PostResponse:
    """Like the post, or unlike it if the current user already liked it"""
    container = get_container()
    toggle_like_use_case = container.get(ToggleLikeUseCase)
    return await toggle_like_use_case.execute(caller_id=current_user.id, post_id=post_id)
