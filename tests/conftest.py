"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client() -> TestClient:
    # Not entered as a context manager: the lifespan (DB pool) never runs.
    return TestClient(app)


@pytest.fixture
def valid_business() -> dict:
    return {
        "name": "Blue Door Cafe",
        "category": "Food",
        "type": "retail",
        "city": "Jalandhar",
        "rating": 4.2,
        "latitude": 31.2244,
        "longitude": 75.7722,
    }
