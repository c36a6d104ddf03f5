# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import InvalidCredentialsError
from ....core.security import TokenService, verify_password
from ...dto.auth_dto import LoginRequest, TokenResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and issuing an access token"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username or email and password

        Returns:
            TokenResponse with access token and user information

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self._find_user(request.username_or_email)
        if user is None or not verify_password(request.password, user.hashed_password):
            logger.info("Rejected login attempt: invalid credentials")
            raise InvalidCredentialsError()

        token = self.token_service.issue(user_id=user.id or "", username=user.username)
        logger.info(f"User {user.id} logged in")

        return TokenResponse(
            access_token=token,
            user=UserResponse(id=user.id or "", username=user.username, email=user.email),
        )

    async def _find_user(self, identifier: str) -> Optional[User]:
        identifier = identifier.strip()
        if "@" in identifier:
            return await self.user_repository.find_by_email(identifier.lower())
        return await self.user_repository.find_by_username(identifier)
