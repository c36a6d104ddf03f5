from .auth_dto import SignupRequest, LoginRequest, TokenResponse
from .user_dto import UserResponse, CurrentUser
from .post_dto import (
    PostCreateRequest,
    PostUpdateRequest,
    PostResponse,
    MessageResponse,
)

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    "CurrentUser",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostResponse",
    "MessageResponse",
]
