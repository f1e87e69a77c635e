"""
FastAPI router for ingestion endpoints.

Both endpoints are dry runs: records are validated and returned, never stored.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Query

from . import service

router = APIRouter()


@router.post("/api/businesses/validate")
async def validate_businesses(payload: Any = Body(...)) -> dict:
    """
    Validate a JSON array of candidate businesses.
    """
    return service.validate_payload(payload).as_dict()


@router.get("/api/businesses/suggestions")
async def suggest_businesses(
    category: str = Query(..., min_length=1, max_length=100),
    city: str = Query(..., min_length=1, max_length=100),
) -> dict:
    return await service.suggest_businesses(category, city)
