from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..exceptions import ValidationError


USERNAME_MIN_LENGTH = 3


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    email: str
    hashed_password: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Normalization and business validations"""
        self.username = (self.username or "").strip()
        self.email = (self.email or "").strip().lower()

        if len(self.username) < USERNAME_MIN_LENGTH:
            raise ValidationError(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
        if not self.email or "@" not in self.email:
            raise ValidationError("Invalid email format")
        if not self.hashed_password:
            raise ValidationError("Password hash is required")
