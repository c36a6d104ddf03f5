from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...core.security import TokenService
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the token service and auth use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the token service (singleton, keyed from settings once)
        and all authentication use cases (factories).
        """
        try:
            container.get(TokenService)
        except ValueError:
            container.register_singleton(TokenService, TokenService.from_settings(get_settings()))

        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
            )
        )

        container.register_factory(
            GetCurrentUserUseCase,
            lambda: GetCurrentUserUseCase(
                token_service=container.get(TokenService)
            )
        )
