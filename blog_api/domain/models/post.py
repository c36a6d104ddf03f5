# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..exceptions import ValidationError


@dataclass
class Post:
    """
    Pure domain model for a blog Post entity.

    ``author_id`` references the owning User and never changes after
    creation. ``author_name`` is the author's username captured when the
    post was created; it is not re-derived if the user changes later.
    ``liked_by`` holds each user ID at most once.
    """
    id: Optional[str]
    title: str
    content: str
    author_id: str
    author_name: str
    liked_by: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        self.title = (self.title or "").strip()
        if not self.title:
            raise ValidationError("Title is required")
        if not self.content or not self.content.strip():
            raise ValidationError("Content is required")
        if not self.author_id:
            raise ValidationError("Author ID is required")
        if not self.author_name:
            raise ValidationError("Author name is required")
        # Set semantics: drop duplicates, keep first-seen order
        self.liked_by = list(dict.fromkeys(self.liked_by or []))

    @property
    def like_count(self) -> int:
        return len(self.liked_by)

    def is_liked_by(self, user_id: Optional[str]) -> bool:
        if not user_id:
            return False
        return user_id in self.liked_by

    def is_authored_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and self.author_id == user_id
