# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import auth_router, user_router
from .api.v1.error_handlers import register_exception_handlers
from .core.config import get_settings
from .infrastructure.db.mongo_connection import ensure_indexes, close_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the upload directory and the MongoDB indexes on startup and
    closes the MongoDB client on shutdown. Startup fails when the indexes
    cannot be created.
    """
    settings = get_settings()
    Path(settings.picture_upload_dir).mkdir(parents=True, exist_ok=True)

    try:
        await ensure_indexes()
    except Exception as e:
        # Without the unique email index concurrent registrations can collide
        logger.critical(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)
        raise

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
    - Error envelope handlers
    - API route registration and static picture serving

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title="Social Network API",
        version="1.0.0",
        description="Users, friendships and profile pictures",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(user_router, prefix="/api/v1/users")

    # Uploaded profile pictures; the directory is created on startup
    application.mount(
        "/assets",
        StaticFiles(directory=settings.picture_upload_dir, check_dir=False),
        name="assets",
    )

    @application.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
