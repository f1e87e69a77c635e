"""
Category service.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException

from core import db

from . import repository

logger = logging.getLogger(__name__)


async def list_categories() -> list[dict[str, Any]]:
    try:
        return await repository.list_categories()
    except db.DatabaseError as exc:
        logger.exception("categories_query_failed")
        raise HTTPException(status_code=500, detail="Database error fetching categories") from exc


async def businesses_in_category(slug: str) -> list[dict[str, Any]]:
    try:
        return await repository.list_businesses_by_slug(slug)
    except db.DatabaseError as exc:
        logger.exception("category_businesses_query_failed slug=%s", slug)
        raise HTTPException(
            status_code=500,
            detail="Database error fetching businesses by category",
        ) from exc
