# Standard library imports
import time
from dataclasses import dataclass
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError as JWTInvalidTokenError

# Local application imports
from .config import Settings
from ..domain.exceptions import InvalidTokenError


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


@dataclass(frozen=True)
class TokenIdentity:
    """Identity carried by a verified access token"""
    user_id: str
    username: str


class TokenService:
    """
    Issues and verifies signed, time-limited access tokens.

    The signing key is handed in once at construction time (normally from
    the process settings) and never read from ambient state afterwards.
    """

    USERNAME_CLAIM = "username"

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 1440) -> None:
        if not secret_key:
            raise ValueError("Token signing key is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )

    def issue(self, user_id: str, username: str) -> str:
        """
        Create a JWT token for a user

        Args:
            user_id: ID of the user (stored in the standard ``sub`` claim)
            username: Username of the user

        Returns:
            Encoded JWT token string
        """
        issued_at = int(time.time())
        expires_at = issued_at + (self.expire_minutes * 60)

        token_payload: Dict[str, Any] = {
            "sub": user_id,
            self.USERNAME_CLAIM: username,
            "iat": issued_at,
            "exp": expires_at,
        }

        return jwt.encode(token_payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenIdentity:
        """
        Decode and validate a JWT token

        Args:
            token: The JWT token string to verify

        Returns:
            TokenIdentity with user ID and username

        Raises:
            InvalidTokenError: If token is malformed, tampered with or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except JWTInvalidTokenError as e:
            raise InvalidTokenError(f"Token is not valid: {e}")

        user_id = payload.get("sub")
        username = payload.get(self.USERNAME_CLAIM)
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError("Token is not valid: missing user ID")
        if not isinstance(username, str) or not username:
            raise InvalidTokenError("Token is not valid: missing username")

        return TokenIdentity(user_id=user_id, username=username)
