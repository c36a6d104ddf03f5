# Local application imports
from ....core.security import TokenService
from ....domain.exceptions import UnauthenticatedError
from ...dto.user_dto import CurrentUser


class GetCurrentUserUseCase:
    """
    Use case for resolving the caller's identity from a bearer token.

    Stateless: the identity comes from the verified token alone, the user
    store is not consulted.
    """

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    def execute(self, token: str) -> CurrentUser:
        """
        Verify a token and return the identity it carries

        Raises:
            UnauthenticatedError: If no token was presented
            InvalidTokenError: If token is malformed, tampered with or expired
        """
        if not token:
            raise UnauthenticatedError()
        identity = self.token_service.verify(token)
        return CurrentUser(id=identity.user_id, username=identity.username)
