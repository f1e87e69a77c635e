"""
Business directory API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from . import service

router = APIRouter()


@router.get("/api/businesses")
async def list_businesses(
    category: str | None = Query(default=None, max_length=100),
    city: str | None = Query(default=None, max_length=100),
) -> list[dict]:
    return await service.list_businesses(category_slug=category, city=city)


# Literal paths are registered before /{business_id} so they win.
@router.get("/api/businesses/top-rated")
async def top_rated_businesses() -> list[dict]:
    return await service.top_rated()


@router.get("/api/businesses/in-bounds")
async def businesses_in_bounds(
    min_lat: float = Query(..., ge=-90, le=90, allow_inf_nan=False),
    max_lat: float = Query(..., ge=-90, le=90, allow_inf_nan=False),
    min_lng: float = Query(..., ge=-180, le=180, allow_inf_nan=False),
    max_lng: float = Query(..., ge=-180, le=180, allow_inf_nan=False),
) -> list[dict]:
    """
    Businesses inside a map viewport (inclusive edges).
    """
    bounds = service.map_bounds(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng)
    return await service.businesses_in_bounds(bounds)


@router.get("/api/businesses/search")
async def search_businesses(q: str = Query(..., min_length=1, max_length=200)) -> list[dict]:
    return await service.search(q)


@router.get("/api/businesses/{business_id}")
async def get_business(business_id: int) -> dict:
    """
    One business with `images` = [primary image, *gallery images].
    """
    return await service.get_business(business_id)
