"""
PostgreSQL listing repository backed by an asyncpg pool.
"""

import logging
from typing import Any, List, Optional, Tuple
from uuid import UUID

import asyncpg

from listing_catalog.filtering import CompiledPredicate, ContainsCondition, EqualsCondition
from listing_catalog.models import Category, Listing, Location, Price


logger = logging.getLogger(__name__)

LISTING_COLUMNS = """
    listing_id,
    name,
    description,
    price_currency,
    price_amount,
    category,
    location_country,
    location_municipality,
    location_geohash
"""


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_where_clause(
    predicate: Optional[CompiledPredicate],
    start_index: int = 1
) -> Tuple[str, List[Any]]:
    """Render a compiled predicate as a parameterised WHERE clause.

    Args:
        predicate: Compiled filter predicate (None or empty for no filter)
        start_index: Number of the first $n placeholder

    Returns:
        Tuple of (clause without the WHERE keyword, parameter values)
    """
    if predicate is None or predicate.is_empty:
        return "", []

    conditions = []
    parameters: List[Any] = []
    index = start_index

    for condition in predicate.conditions:
        if isinstance(condition, ContainsCondition):
            conditions.append(f"LOWER({condition.column}) LIKE LOWER(${index})")
            parameters.append(f"%{_escape_like(condition.needle)}%")
        elif isinstance(condition, EqualsCondition):
            conditions.append(f"{condition.column} = ${index}")
            parameters.append(condition.value.value)
        else:
            raise TypeError(f"Unsupported condition type: {type(condition).__name__}")
        index += 1

    return " AND ".join(conditions), parameters


def row_to_listing(row: Any) -> Listing:
    """Convert a listings table row to a Listing."""
    return Listing(
        listing_id=row['listing_id'],
        name=row['name'],
        description=row['description'],
        price=Price(
            currency=row['price_currency'],
            amount=row['price_amount'],
        ),
        category=Category(row['category']),
        location=Location(
            country=row['location_country'],
            municipality=row['location_municipality'],
            geohash=row['location_geohash'],
        ),
    )


def _affected_rows(status: str) -> int:
    # asyncpg returns command tags such as "UPDATE 1" or "DELETE 0"
    return int(status.split()[-1])


class PostgresListingRepository:
    """Listing persistence over the `listings` table."""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    async def fetch_candidates(
        self,
        predicate: Optional[CompiledPredicate] = None
    ) -> Tuple[List[Listing], int]:
        """Fetch every listing matching the predicate, plus the match count.

        Rows come back oldest first with listing_id breaking created_at ties,
        the same order the in-memory store uses. Both statements read one
        snapshot so the count always agrees with the rows.
        """
        where_clause, parameters = build_where_clause(predicate)
        where_sql = f" WHERE {where_clause}" if where_clause else ""

        async with self.pool.acquire() as conn:
            async with conn.transaction(isolation="repeatable_read", readonly=True):
                rows = await conn.fetch(
                    f"SELECT {LISTING_COLUMNS} FROM listings{where_sql} "
                    "ORDER BY created_at, listing_id",
                    *parameters
                )
                total = await conn.fetchval(
                    f"SELECT COUNT(*) FROM listings{where_sql}",
                    *parameters
                )

        return [row_to_listing(row) for row in rows], total

    async def create(self, listing: Listing) -> Listing:
        async with self.pool.acquire() as conn:
            await conn.execute("""
                INSERT INTO listings (
                    listing_id, name, description, price_currency, price_amount,
                    category, location_country, location_municipality, location_geohash
                ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
            """, *self._listing_values(listing))
        logger.info(f"Created listing {listing.listing_id}")
        return listing

    async def get_by_id(self, listing_id: UUID) -> Optional[Listing]:
        async with self.pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT {LISTING_COLUMNS} FROM listings WHERE listing_id = $1",
                listing_id
            )
        return row_to_listing(row) if row else None

    async def update(self, listing: Listing) -> Optional[Listing]:
        async with self.pool.acquire() as conn:
            status = await conn.execute("""
                UPDATE listings SET
                    name = $2,
                    description = $3,
                    price_currency = $4,
                    price_amount = $5,
                    category = $6,
                    location_country = $7,
                    location_municipality = $8,
                    location_geohash = $9,
                    updated_at = NOW()
                WHERE listing_id = $1
            """, *self._listing_values(listing))
        return listing if _affected_rows(status) > 0 else None

    async def delete(self, listing_id: UUID) -> bool:
        async with self.pool.acquire() as conn:
            status = await conn.execute("DELETE FROM listings WHERE listing_id = $1", listing_id)
        return _affected_rows(status) > 0

    async def exists(self, listing_id: UUID) -> bool:
        async with self.pool.acquire() as conn:
            return await conn.fetchval(
                "SELECT EXISTS(SELECT 1 FROM listings WHERE listing_id = $1)",
                listing_id
            )

    async def count(self) -> int:
        async with self.pool.acquire() as conn:
            return await conn.fetchval("SELECT COUNT(*) FROM listings")

    @staticmethod
    def _listing_values(listing: Listing) -> tuple:
        return (
            listing.listing_id,
            listing.name,
            listing.description,
            listing.price.currency,
            listing.price.amount,
            listing.category.value,
            listing.location.country,
            listing.location.municipality,
            listing.location.geohash,
        )
