"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.

Run with:
    uvicorn influencer_service.main:app
"""
import logging
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from pymongo.errors import PyMongoError

from influencer_service import __version__
from influencer_service.api.v1 import influencer_router
from influencer_service.api.error_handlers import register_error_handlers
from influencer_service.core.config import get_settings
from influencer_service.core.logging_config import configure_logging
from influencer_service.di.container import get_container
from influencer_service.utils.datetime_utils import now_iso

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - API route registration and envelope error handlers
    - Startup/shutdown event handlers for the MongoDB connection

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Influencer API",
        description="CRUD API for influencer profiles, social links and visit counters",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(influencer_router)
    register_error_handlers(application)

    @application.on_event("startup")
    def startup_event():
        """Open the MongoDB connection."""
        mongo_client = get_container().get("mongo_client")
        mongo_client.connect()
        logger.info("Influencer API started")

    @application.on_event("shutdown")
    def shutdown_event():
        """Close the MongoDB connection."""
        mongo_client = get_container().get("mongo_client")
        mongo_client.close()
        logger.info("Influencer API stopped")

    @application.get("/")
    def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": "Influencer API",
            "version": __version__,
            "docs": "/docs"
        }

    @application.get("/health")
    def health():
        """Health check endpoint; reports whether the store answers."""
        mongo_client = get_container().get("mongo_client")
        try:
            mongo_client.ping()
            database = "up"
        except PyMongoError:
            logger.warning("Health check: MongoDB ping failed", exc_info=True)
            database = "down"
        return {"status": "healthy" if database == "up" else "degraded", "database": database, "time": now_iso()}

    return application


# Create application instance
app = create_application()
