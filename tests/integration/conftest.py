"""
Fixtures for API tests: the real application with the DI container wired
to in-memory repositories (no database, lifespan not started).
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from blog_api.core.security import TokenService
from blog_api.di.base_container import BaseContainer
from blog_api.di.providers import AuthProvider, PostProvider
from blog_api.domain.repositories.post_repository import PostRepository
from blog_api.domain.repositories.user_repository import UserRepository

CONTAINER_LOOKUPS = (
    "blog_api.api.v1.auth_controller.get_container",
    "blog_api.api.v1.post_controller.get_container",
    "blog_api.api.v1.dependencies.get_container",
)


@pytest.fixture
def api_container(user_repo, post_repo, token_service):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(PostRepository, post_repo)
    container.register_singleton(TokenService, token_service)
    AuthProvider.register(container)
    PostProvider.register(container)
    return container


@pytest.fixture
def client(api_container):
    """Create test client with the in-memory container."""
    from blog_api.main import app

    patches = [patch(target, return_value=api_container) for target in CONTAINER_LOOKUPS]
    for p in patches:
        p.start()
    try:
        yield TestClient(app)
    finally:
        for p in patches:
            p.stop()


@pytest.fixture
def signup_and_login(client):
    """Factory fixture: register a user over HTTP and return auth headers plus user info."""

    def _signup_and_login(username: str, password: str = "password123"):
        response = client.post(
            "/api/auth/signup",
            json={"username": username, "email": f"{username}@example.com", "password": password},
        )
        assert response.status_code == 201, response.text
        response = client.post("/api/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        data = response.json()
        return {"Authorization": f"Bearer {data['access_token']}"}, data["user"]

    return _signup_and_login
