"""
Pydantic schemas for business directory endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class MapBounds(BaseModel):
    min_lat: float = Field(..., ge=-90, le=90)
    max_lat: float = Field(..., ge=-90, le=90)
    min_lng: float = Field(..., ge=-180, le=180)
    max_lng: float = Field(..., ge=-180, le=180)

    @model_validator(mode="after")
    def _check_order(self) -> MapBounds:
        if self.min_lat > self.max_lat:
            raise ValueError("min_lat must be <= max_lat")
        if self.min_lng > self.max_lng:
            raise ValueError("min_lng must be <= max_lng")
        return self
