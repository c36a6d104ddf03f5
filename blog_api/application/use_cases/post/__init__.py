from .list_posts import ListPostsUseCase
from .create_post import CreatePostUseCase
from .update_post import UpdatePostUseCase
from .delete_post import DeletePostUseCase
from .toggle_like import ToggleLikeUseCase

__all__ = [
    "ListPostsUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "ToggleLikeUseCase",
]
