"""
Business directory reads (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db

TOP_RATED_LIMIT = 12


async def list_businesses(
    *,
    category_slug: str | None = None,
    city: str | None = None,
) -> list[dict[str, Any]]:
    """
    All businesses with their category name/slug, newest first.

    `category_slug` and `city` narrow the listing when given.
    """
    return await db.fetch_all(
        """
        SELECT b.*, c.name AS category_name, c.slug AS category_slug
        FROM businesses b
        LEFT JOIN categories c ON b.category_id = c.id
        WHERE ($1::text IS NULL OR c.slug = $1)
          AND ($2::text IS NULL OR b.city = $2)
        ORDER BY b.created_at DESC
        """,
        category_slug,
        city,
    )


async def list_top_rated(limit: int = TOP_RATED_LIMIT) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT b.*, c.name AS category_name
        FROM businesses b
        LEFT JOIN categories c ON b.category_id = c.id
        ORDER BY b.rating DESC
        LIMIT $1
        """,
        limit,
    )


async def get_business(business_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT b.*, c.name AS category_name
        FROM businesses b
        LEFT JOIN categories c ON b.category_id = c.id
        WHERE b.id = $1
        """,
        business_id,
    )


async def list_gallery_urls(business_id: int) -> list[str | None]:
    rows = await db.fetch_all(
        """
        SELECT image_url
        FROM business_images
        WHERE business_id = $1
        """,
        business_id,
    )
    return [row["image_url"] for row in rows]


async def list_in_bounds(
    *,
    min_lat: float,
    max_lat: float,
    min_lng: float,
    max_lng: float,
) -> list[dict[str, Any]]:
    """
    Businesses inside a map viewport; edges are inclusive.
    """
    return await db.fetch_all(
        """
        SELECT b.*, c.name AS category_name
        FROM businesses b
        LEFT JOIN categories c ON b.category_id = c.id
        WHERE b.latitude >= $1
          AND b.latitude <= $2
          AND b.longitude >= $3
          AND b.longitude <= $4
        """,
        min_lat,
        max_lat,
        min_lng,
        max_lng,
    )


async def search_businesses(term: str) -> list[dict[str, Any]]:
    """
    Case-insensitive substring match on business or category name, best rated first.
    """
    return await db.fetch_all(
        """
        SELECT b.*, c.name AS category_name
        FROM businesses b
        LEFT JOIN categories c ON b.category_id = c.id
        WHERE b.name ILIKE ('%' || $1 || '%')
           OR c.name ILIKE ('%' || $1 || '%')
        ORDER BY b.rating DESC
        """,
        term,
    )
