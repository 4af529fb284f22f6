"""
FastAPI main application for the listing catalog.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

import uvicorn

from listing_catalog.config import get_settings
from listing_catalog.db import init_db, close_db
from listing_catalog.routers import listings

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info("Starting listing catalog API...")
    await init_db()
    logger.info("Storage initialized")

    yield

    logger.info("Shutting down listing catalog API...")
    await close_db()


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title="Listing Catalog API",
        description="Marketplace listing catalog with proximity-ranked search",
        version=VERSION,
        lifespan=lifespan
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "version": VERSION
        }

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "Listing Catalog API",
            "docs": "/docs",
            "health": "/health"
        }

    app.include_router(listings.router, prefix="/api", tags=["listings"])
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("listing_catalog.main:app", host="0.0.0.0", port=8000)
