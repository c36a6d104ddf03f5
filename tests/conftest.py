"""
Shared pytest fixtures for blog API tests.

The in-memory repositories mirror the Mongo repositories' contracts,
including the atomic, author-filtered writes, so use case and API tests
run without a database.
"""
import itertools
import os
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from unittest.mock import patch

import pytest
from bson import ObjectId

from blog_api.core.security import TokenService, hash_password
from blog_api.domain.exceptions import DuplicateEmailError, DuplicateUsernameError
from blog_api.domain.models.post import Post
from blog_api.domain.models.user import User
from blog_api.domain.repositories.post_repository import PostRepository
from blog_api.domain.repositories.user_repository import UserRepository

TEST_SECRET = "test_jwt_secret_key_for_unit_tests_only"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        email = (email or "").strip().lower()
        return next((u for u in self.users.values() if u.email == email), None)

    async def find_by_username(self, username: str) -> Optional[User]:
        username = (username or "").strip()
        return next((u for u in self.users.values() if u.username == username), None)

    async def create(self, user: User) -> User:
        if await self.find_by_username(user.username) is not None:
            raise DuplicateUsernameError()
        if await self.find_by_email(user.email) is not None:
            raise DuplicateEmailError()
        now = datetime.now(timezone.utc)
        saved = User(
            id=str(ObjectId()),
            username=user.username,
            email=user.email,
            hashed_password=user.hashed_password,
            created_at=now,
            updated_at=now,
        )
        self.users[saved.id] = saved
        return saved


class InMemoryPostRepository(PostRepository):
    def __init__(self) -> None:
        self.posts: Dict[str, Post] = {}
        self._clock = itertools.count()
        self._epoch = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        # Strictly increasing timestamps keep creation order observable
        return self._epoch + timedelta(seconds=next(self._clock))

    def _copy(self, post: Post) -> Post:
        return Post(
            id=post.id,
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            author_name=post.author_name,
            liked_by=list(post.liked_by),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    async def list_all(self) -> List[Post]:
        ordered = sorted(self.posts.values(), key=lambda p: (p.created_at, p.id), reverse=True)
        return [self._copy(p) for p in ordered]

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        return self._copy(post) if post else None

    async def create(self, post: Post) -> Post:
        now = self._tick()
        saved = self._copy(post)
        saved.id = str(ObjectId())
        saved.created_at = now
        saved.updated_at = now
        self.posts[saved.id] = saved
        return self._copy(saved)

    async def update_content(self, post_id, author_id, title, content) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is None or post.author_id != author_id:
            return None
        if title is not None:
            post.title = title
        if content is not None:
            post.content = content
        post.updated_at = self._tick()
        return self._copy(post)

    async def delete(self, post_id: str, author_id: str) -> bool:
        post = self.posts.get(post_id)
        if post is None or post.author_id != author_id:
            return False
        del self.posts[post_id]
        return True

    async def toggle_like(self, post_id: str, user_id: str) -> Optional[Post]:
        post = self.posts.get(post_id)
        if post is None:
            return None
        if user_id in post.liked_by:
            post.liked_by.remove(user_id)
        else:
            post.liked_by.append(user_id)
        return self._copy(post)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_blog_db",
        "JWT_SECRET_KEY": TEST_SECRET,
        "JWT_ALGORITHM": "HS256",
        "ACCESS_TOKEN_EXPIRE_MINUTES": "1440",
        "DEBUG": "false",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key=TEST_SECRET, algorithm="HS256", expire_minutes=60)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def post_repo() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def make_user(user_repo):
    """Factory fixture: store a user with a real bcrypt hash and return it."""

    async def _make_user(username: str, password: str = "secret123", email: Optional[str] = None) -> User:
        return await user_repo.create(
            User(
                id=None,
                username=username,
                email=email or f"{username}@example.com",
                hashed_password=hash_password(password),
            )
        )

    return _make_user
