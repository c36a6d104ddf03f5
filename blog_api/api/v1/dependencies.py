# Standard library imports
import logging
from typing import Optional

# External package imports
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import CurrentUser
from ...domain.exceptions import InvalidTokenError, UnauthenticatedError
from ...di.container import get_container

logger = logging.getLogger(__name__)

# Missing credentials are reported through our own error taxonomy
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> CurrentUser:
    """
    FastAPI dependency guarding protected routes

    Extracts the bearer token from the Authorization header, verifies it and
    attaches the resolved identity to ``request.state.current_user``.

    Raises:
        UnauthenticatedError: If no bearer token was presented
        InvalidTokenError: If the token is malformed, tampered with or expired
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    user = get_current_user_use_case.execute(credentials.credentials)
    request.state.current_user = user
    return user


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Optional[CurrentUser]:
    """
    FastAPI dependency for public routes that personalize their output

    Returns the caller's identity when a valid token is presented and None
    otherwise; an invalid token is treated as an anonymous caller.
    """
    if credentials is None or not credentials.credentials:
        return None

    try:
        return await get_current_user(request, credentials)
    except InvalidTokenError as exception:
        logger.debug(f"Ignoring invalid token on public route: {exception.message}")
        return None
