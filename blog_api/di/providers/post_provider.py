from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...application.use_cases.post.toggle_like import ToggleLikeUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            ListPostsUseCase,
            CreatePostUseCase,
            UpdatePostUseCase,
            DeletePostUseCase,
            ToggleLikeUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(post_repository=container.get(PostRepository)),
            )
