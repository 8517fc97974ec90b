# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import auth_router, health_router, notes_router, register_exception_handlers
from .config import get_settings
from .core.exceptions import ConfigurationError
from .core.logging import RequestContextMiddleware, get_logger, setup_logging
from .core.redis_client import get_redis_client
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


def verify_configuration() -> None:
    """Refuse to start a production instance that cannot sign tokens."""
    if not settings.jwt_secret:
        if settings.is_production:
            raise ConfigurationError("JWT secret is not configured")
        logger.warning("JWT_SECRET is not set, token issuing and verification will fail")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(
        "Starting collabnotes application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )
    verify_configuration()

    # Redis only backs rate limiting, so the app runs without it
    redis_client = get_redis_client()
    try:
        await redis_client.connect()
        logger.info("Redis connection established")
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Continuing without rate limiting...")

    if os.getenv("COLLABNOTES_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to COLLABNOTES_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    # Shutdown
    logger.info("Shutting down collabnotes application")
    try:
        await redis_client.disconnect()
        logger.info("Redis connection closed")
    except Exception as e:
        logger.warning(f"Redis disconnect failed: {e}")


app = FastAPI(
    title=settings.app_name,
    description="Collaborative notes API",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Request id + access logging
app.add_middleware(RequestContextMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": settings.app_name,
        "version": __version__,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json"
        },
        "endpoints": {
            "authentication": "/api/auth/",
            "notes": "/api/notes/",
            "health": "/api/health/"
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("collabnotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
