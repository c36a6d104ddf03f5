from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a new user.

        Raises DuplicateUsernameError / DuplicateEmailError when a
        uniqueness constraint is violated; nothing is written in that case.
        """
        pass
