"""
KediTV Catalog - FastAPI Backend

Serves the content catalog built from an IPTV M3U playlist.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from keditv.config import get_settings
from keditv.limiter import limiter
from keditv.services.catalog import CatalogError, get_catalog_service
from keditv.routers import catalog, series

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    logger.info("Starting KediTV Catalog Backend...")

    playlist_path = get_settings().playlist_path
    if playlist_path:
        try:
            result = get_catalog_service().load_file(playlist_path)
            logger.info(f"Initial catalog: {len(result.items)} items from {playlist_path}")
        except (FileNotFoundError, CatalogError) as e:
            logger.error(f"Failed to load initial playlist {playlist_path}: {e}")
    else:
        logger.info("No playlist configured, starting with an empty catalog")

    yield

    logger.info("Shutting down KediTV Catalog Backend...")


# Create FastAPI app
settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Content catalog for IPTV playlists",
    lifespan=lifespan
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(catalog.router)
app.include_router(series.router)


# API endpoints
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version}


@app.get("/api/stats")
async def get_stats():
    """Get catalog statistics."""
    return get_catalog_service().stats()


# Error handlers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "keditv.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
