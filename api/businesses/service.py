"""
Business directory service.

Store failures are logged here and surfaced as a generic 500; the handlers
never retry.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException
from pydantic import ValidationError

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)


def _store_error(detail: str) -> HTTPException:
    return HTTPException(status_code=500, detail=detail)


async def list_businesses(
    *,
    category_slug: str | None = None,
    city: str | None = None,
) -> list[dict[str, Any]]:
    category_slug = (category_slug or "").strip() or None
    city = (city or "").strip() or None
    try:
        return await repository.list_businesses(category_slug=category_slug, city=city)
    except db.DatabaseError as exc:
        logger.exception("businesses_query_failed category=%s city=%s", category_slug, city)
        raise _store_error("Database error fetching businesses") from exc


async def top_rated() -> list[dict[str, Any]]:
    try:
        return await repository.list_top_rated()
    except db.DatabaseError as exc:
        logger.exception("top_rated_query_failed")
        raise _store_error("Database error fetching top rated businesses") from exc


def with_gallery(business: dict[str, Any], gallery: list[str | None]) -> dict[str, Any]:
    """
    Attach `images`: the primary image first (even when null), then the gallery.
    """
    return {**business, "images": [business.get("image_url"), *gallery]}


async def get_business(business_id: int) -> dict[str, Any]:
    try:
        business = await repository.get_business(business_id)
        if business is None:
            raise HTTPException(status_code=404, detail="Business not found.")
        gallery = await repository.list_gallery_urls(business_id)
    except db.DatabaseError as exc:
        logger.exception("business_detail_query_failed business_id=%s", business_id)
        raise _store_error("Database error fetching business details") from exc

    return with_gallery(business, gallery)


def map_bounds(*, min_lat: float, max_lat: float, min_lng: float, max_lng: float) -> schemas.MapBounds:
    try:
        return schemas.MapBounds(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=[err["msg"] for err in exc.errors()],
        ) from exc


async def businesses_in_bounds(bounds: schemas.MapBounds) -> list[dict[str, Any]]:
    try:
        return await repository.list_in_bounds(**bounds.model_dump())
    except db.DatabaseError as exc:
        logger.exception("bounds_query_failed bounds=%s", bounds.model_dump())
        raise _store_error("Database error fetching businesses by location") from exc


async def search(term: str) -> list[dict[str, Any]]:
    term = (term or "").strip()
    if not term:
        raise HTTPException(status_code=422, detail="Search term is required.")
    try:
        return await repository.search_businesses(term)
    except db.DatabaseError as exc:
        logger.exception("search_query_failed term=%s", term)
        raise _store_error("Database error searching businesses") from exc
