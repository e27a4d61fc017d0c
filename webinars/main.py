"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from webinars.api.v1 import webinar_router
from webinars.core.config import get_settings
from webinars.core.logging import configure_logging
from webinars.di.container import peek_container


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - API route registration
    - Shutdown handler closing the database client

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=settings.app_name,
        description="API for managing webinar seat capacity",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(webinar_router, prefix="/api/v1/webinars")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @application.on_event("shutdown")
    async def shutdown_event():
        """Close the MongoDB client if one was registered."""
        container = peek_container()
        if container is not None and "mongo_client" in container:
            await container.get("mongo_client").close()

    return application


# Create application instance
app = create_application()
