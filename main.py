"""
Prepfolio - Project Portfolio Interview Rehearsal

Main application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prepfolio.config.settings import get_settings
from prepfolio.api.router import api_router
from prepfolio.api.dependencies import cleanup, get_provider, init_provider
from prepfolio.core.provider import InterviewProvider

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Prepfolio...")
    logger.info(f"Running in {'debug' if settings.debug else 'production'} mode")
    provider = init_provider(settings)
    logger.info(f"Serving with the {provider.name} provider")

    yield

    # Shutdown
    logger.info("Shutting down Prepfolio...")
    await cleanup()


# Create FastAPI application
app = FastAPI(
    title="Prepfolio",
    description="Project portfolio interview rehearsal",
    version=settings.app_version,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check(provider: InterviewProvider = Depends(get_provider)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "provider": provider.name,
    }


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
