"""
Fixtures for API tests: the real FastAPI app with the DI container patched.
"""
from contextlib import ExitStack
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from tagscan.application.dto.user_dto import UserResponse

CONTAINER_USERS = [
    "tagscan.main.get_container",
    "tagscan.api.v1.dependencies.get_container",
    "tagscan.api.v1.auth_controller.get_container",
    "tagscan.api.v1.ocr_controller.get_container",
    "tagscan.api.v1.live_controller.get_container",
    "tagscan.api.v1.asset_tag_controller.get_container",
]


@pytest.fixture
def registered():
    """Map of type -> instance served by the mocked container; tests fill it in."""
    return {}


@pytest.fixture
def mock_container(registered):
    container = MagicMock()
    container.get.side_effect = lambda cls: registered.get(cls)
    return container


@pytest.fixture
def regular_user():
    return UserResponse(id="usr-1", email="user@example.com", full_name="Regular", is_verified=True)


@pytest.fixture
def admin_user():
    return UserResponse(id="adm-1", email="admin@example.com", is_verified=True, role="admin")


@pytest.fixture
def app():
    from tagscan.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, mock_container):
    """Create test client with mocked container."""
    with ExitStack() as stack:
        for target in CONTAINER_USERS:
            stack.enter_context(patch(target, return_value=mock_container))
        with TestClient(app) as c:
            yield c


@pytest.fixture
def login_as(app):
    """Bypass bearer auth by overriding get_current_user."""
    from tagscan.api.v1.dependencies import get_current_user

    def _login(user: UserResponse) -> None:
        app.dependency_overrides[get_current_user] = lambda: user

    return _login
