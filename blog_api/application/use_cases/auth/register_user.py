# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import DuplicateEmailError, DuplicateUsernameError
from ....core.security import hash_password
from ...dto.auth_dto import SignupRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: SignupRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Signup request with username, email and password

        Returns:
            UserResponse with created user information

        Raises:
            DuplicateUsernameError: If the username is already taken
            DuplicateEmailError: If the email is already registered
            ValidationError: If the normalized username is too short
        """
        username = request.username.strip()
        email = str(request.email).strip().lower()

        # Check uniqueness before hashing; the store's unique indexes
        # still guard against a concurrent signup slipping through
        if await self.user_repository.find_by_username(username) is not None:
            raise DuplicateUsernameError()
        if await self.user_repository.find_by_email(email) is not None:
            raise DuplicateEmailError()

        new_user = User(
            id=None,  # Will be set by repository
            username=username,
            email=email,
            hashed_password=hash_password(request.password),
        )

        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.id} ({saved_user.username})")

        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
            email=saved_user.email,
        )
