"""
Category reads (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_categories() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM categories
        ORDER BY name ASC
        """
    )


async def list_businesses_by_slug(slug: str) -> list[dict[str, Any]]:
    """
    Businesses in the category with `slug`, highest rating first.

    The inner join makes an unknown slug an empty result, not an error.
    """
    return await db.fetch_all(
        """
        SELECT b.*, c.name AS category_name
        FROM businesses b
        JOIN categories c ON b.category_id = c.id
        WHERE c.slug = $1
        ORDER BY b.rating DESC
        """,
        slug,
    )
