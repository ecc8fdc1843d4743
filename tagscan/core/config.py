# Standard library imports
import os
from typing import Final, Optional

# Local application imports
from ..utils.asset_url import DEFAULT_ASSET_URL_TEMPLATE


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "web_ocr_db")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )
        self.require_user_verification: Final[bool] = _env_bool("REQUIRE_USER_VERIFICATION", "true")

        # Vision model Configuration (OpenAI-compatible chat completions endpoint)
        self.vision_api_key: Final[str] = os.getenv("VISION_API_KEY", os.getenv("OPENAI_API_KEY", ""))
        self.vision_api_url: Final[str] = os.getenv(
            "VISION_API_URL",
            "https://api.openai.com/v1/chat/completions"
        )
        self.vision_model: Final[str] = os.getenv("VISION_MODEL", "gpt-4.1-nano")
        self.vision_max_tokens: Final[int] = int(os.getenv("VISION_MAX_TOKENS", "64"))

        # Extraction pipeline
        self.extraction_timeout_seconds: Final[float] = float(
            os.getenv("EXTRACTION_TIMEOUT_SECONDS", "30")
        )
        self.extraction_concurrency: Final[int] = max(1, int(os.getenv("EXTRACTION_CONCURRENCY", "4")))
        self.asset_url_template: Final[str] = os.getenv("ASSET_URL_TEMPLATE", DEFAULT_ASSET_URL_TEMPLATE)

        # Live push channels
        self.live_keepalive_seconds: Final[float] = float(os.getenv("LIVE_KEEPALIVE_SECONDS", "15"))
        self.live_idle_timeout_seconds: Final[float] = float(os.getenv("LIVE_IDLE_TIMEOUT_SECONDS", "0"))
        self.live_queue_size: Final[int] = int(os.getenv("LIVE_QUEUE_SIZE", "100"))

        # HTTP surface
        self.frontend_origin: Final[str] = os.getenv("FRONTEND_ORIGIN", "")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
