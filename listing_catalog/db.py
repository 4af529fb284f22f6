"""
Database connection and initialization.
"""

import asyncpg
from typing import Optional
import logging

from listing_catalog.config import CatalogSettings, get_settings
from listing_catalog.error_handling import retry_with_backoff
from listing_catalog.repositories import (
    InMemoryListingRepository,
    ListingStore,
    PostgresListingRepository,
)

logger = logging.getLogger(__name__)

# Global storage handles
pg_pool: Optional[asyncpg.Pool] = None
memory_store: Optional[InMemoryListingRepository] = None


async def init_db(settings: Optional[CatalogSettings] = None):
    """Initialize the configured storage backend"""
    global pg_pool, memory_store
    settings = settings or get_settings()

    if settings.storage_backend == "memory":
        memory_store = InMemoryListingRepository()
        logger.info("Using in-memory listing storage")
        return

    database = settings.database
    try:
        pg_pool = await retry_with_backoff(
            asyncpg.create_pool,
            database.url,
            min_size=database.min_pool_size,
            max_size=database.max_pool_size,
            config=settings.retry_config,
        )
        logger.info("PostgreSQL connection pool created")

        await create_tables()
    except Exception as e:
        logger.error(f"Failed to connect to PostgreSQL: {e}")
        raise


async def close_db():
    """Close database connections"""
    global pg_pool, memory_store

    if pg_pool:
        await pg_pool.close()
        pg_pool = None
        logger.info("PostgreSQL connection pool closed")

    memory_store = None


async def create_tables():
    """Create database tables if they don't exist"""
    async with pg_pool.acquire() as conn:
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS listings (
                listing_id UUID PRIMARY KEY,
                name VARCHAR(100) NOT NULL,
                description TEXT NOT NULL,
                price_currency CHAR(3) NOT NULL,
                price_amount NUMERIC(12, 2) NOT NULL CHECK (price_amount > 0),
                category TEXT NOT NULL,
                location_country CHAR(2) NOT NULL,
                location_municipality TEXT NOT NULL,
                location_geohash CHAR(7) NOT NULL,
                created_at TIMESTAMP NOT NULL DEFAULT NOW(),
                updated_at TIMESTAMP NOT NULL DEFAULT NOW()
            )
        """)

        await conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_listings_category ON listings(category);
        """)

        await conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_listings_created_at ON listings(created_at);
        """)

        logger.info("Database tables created/verified")


def get_pg_pool() -> asyncpg.Pool:
    """Get PostgreSQL connection pool"""
    if pg_pool is None:
        raise RuntimeError("Database not initialized")
    return pg_pool


def get_listing_repository() -> ListingStore:
    """Get the repository for the initialized storage backend"""
    if memory_store is not None:
        return memory_store
    return PostgresListingRepository(get_pg_pool())
