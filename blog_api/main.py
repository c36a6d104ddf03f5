# Standard library imports
from datetime import datetime, timezone
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, post_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import setup_logging
from .infrastructure.db import ensure_indexes, close_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures MongoDB indexes on startup and closes the client on shutdown.
    An unreachable database does not prevent the server from starting, so
    the health route keeps answering.
    """
    try:
        await ensure_indexes()
    except Exception as e:
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error translation handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file before settings are read
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Blog API",
        version="1.0.0",
        description="Blog backend with token authentication, author-only editing and likes",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router, prefix="/api/auth")
    application.include_router(post_router, prefix="/api/blogs")

    @application.get("/", tags=["health"])
    async def health() -> dict:
        """Health check endpoint - returns service status"""
        return {
            "message": "Blog API is running",
            "status": "online",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    logger.info(f"Application created (debug={settings.debug})")
    return application


# Create application instance
app = create_application()
