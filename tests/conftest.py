"""
Shared pytest fixtures for tagscan tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from tagscan.domain.models.asset_tag import AssetTagRecord


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_tagscan_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "VISION_API_KEY": "test_vision_key_placeholder",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.require_user_verification = True
    mock.vision_api_key = "test_vision_key"
    mock.vision_api_url = "https://vision.test/v1/chat/completions"
    mock.vision_model = "test-vision-model"
    mock.vision_max_tokens = 64
    mock.extraction_timeout_seconds = 5.0
    mock.extraction_concurrency = 4
    mock.live_keepalive_seconds = 0
    mock.live_idle_timeout_seconds = 0.2
    mock.live_queue_size = 10

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("tagscan.core.config.get_settings", return_value=mock), patch(
        "tagscan.core.security.get_settings", return_value=mock
    ), patch(
        "tagscan.application.use_cases.auth.login_user.get_settings", return_value=mock
    ), patch(
        "tagscan.infrastructure.external.vision_tag_client.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def make_record():
    """Factory for persisted AssetTagRecord instances."""
    def _make(
        asset_tag: str = "12345",
        owner_user_id: str = "usr-1",
        record_id: str = "65a000000000000000000001",
        room_number=None,
    ) -> AssetTagRecord:
        return AssetTagRecord(
            id=record_id,
            asset_tag=asset_tag,
            asset_url=f"https://assets.example.com/asset/{asset_tag.zfill(12)}?view=details&source=scan",
            scanned_at=datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc),
            owner_user_id=owner_user_id,
            owner_email=f"{owner_user_id}@example.com",
            source_image_name="photo.jpg",
            room_number=room_number,
        )
    return _make
