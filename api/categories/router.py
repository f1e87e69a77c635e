"""
Category API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import service

router = APIRouter()


@router.get("/api/categories")
async def list_categories() -> list[dict]:
    return await service.list_categories()


@router.get("/api/categories/{slug}/businesses")
async def category_businesses(slug: str) -> list[dict]:
    return await service.businesses_in_category(slug)
