# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging
from typing import List, Optional

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, ocr_router, live_router, asset_tag_router
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client
from .infrastructure.notifications.subscription_registry import SubscriptionRegistry

logger = logging.getLogger(__name__)

DEV_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://localhost:8081",
]

PRODUCTION_ORIGINS = [
    "https://web-ocr-frontend-kappa.vercel.app",
    "https://web-ocr-frontend-git-main-ernest-juchheims-projects.vercel.app",
    "https://web-ocr-frontend-i17xzv2ko-ernest-juchheims-projects.vercel.app",
]

# Any local dev server port
LOCAL_ORIGIN_REGEX = r"^http://(localhost|127\.0\.0\.1)(:\d+)?$"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container (and with it the subscription registry) at
    startup, and releases the shared HTTP client and Mongo client at shutdown.
    """
    get_container()
    logger.info("Dependency container initialized")

    yield

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)

    close_database()
    logger.info("Application shutdown complete")


def build_allowed_origins(frontend_origin: Optional[str]) -> List[str]:
    origins = PRODUCTION_ORIGINS + DEV_ORIGINS
    if frontend_origin and frontend_origin not in origins:
        origins.append(frontend_origin)
    return origins


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    logging.getLogger("tagscan").setLevel(level)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Asset Tag Scanner API",
        version="1.0.0",
        description="Extracts asset tags from photos and streams them to live subscribers",
        lifespan=lifespan
    )

    allowed_origins = build_allowed_origins(settings.frontend_origin)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_origin_regex=LOCAL_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(ocr_router, prefix="/api/v1/ocr")
    application.include_router(live_router, prefix="/api/v1/live")
    application.include_router(asset_tag_router, prefix="/api/v1/manage/tags")

    @application.get("/", tags=["health"])
    async def health_check():
        registry = get_container().get(SubscriptionRegistry)
        return {
            "status": "ok",
            "message": "Asset tag scanner is running",
            "liveChannels": registry.total_channels(),
        }

    return application


# Create application instance
app = create_application()
