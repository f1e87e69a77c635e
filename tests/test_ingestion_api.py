"""Endpoint tests for validation and LLM suggestions (Ollama mocked)."""

from __future__ import annotations

import json
from typing import Any

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from core import ollama


class TestValidateEndpoint:
    def test_valid_and_invalid_records(self, client: TestClient, valid_business: dict) -> None:
        bad = {**valid_business, "type": "kiosk", "longitude": 200}
        response = client.post("/api/businesses/validate", json=[valid_business, bad])

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "validBusinesses": [valid_business],
            "errors": [
                "Business 2: type must be one of: retail, commercial, service, "
                "longitude must be <= 180"
            ],
        }

    def test_nan_literal_in_body_is_rejected(self, client: TestClient, valid_business: dict) -> None:
        body = json.dumps([valid_business]).replace("4.2", "NaN")
        response = client.post(
            "/api/businesses/validate",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "validBusinesses": [],
            "errors": ["Business 1: rating must be number"],
        }

    def test_object_body_is_422(self, client: TestClient, valid_business: dict) -> None:
        response = client.post("/api/businesses/validate", json=valid_business)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json() == {"detail": "Expected an array of businesses."}


class TestSuggestionsEndpoint:
    def _patch_chat(self, monkeypatch: pytest.MonkeyPatch, reply: str | Exception) -> list[dict]:
        calls: list[dict] = []

        async def fake_chat(**kwargs: Any) -> str:
            calls.append(kwargs)
            if isinstance(reply, Exception):
                raise reply
            return reply

        monkeypatch.setattr(ollama, "chat_text", fake_chat)
        return calls

    def test_generated_records_are_validated(
        self,
        client: TestClient,
        monkeypatch: pytest.MonkeyPatch,
        valid_business: dict,
    ) -> None:
        bad = {**valid_business, "rating": 7}
        calls = self._patch_chat(monkeypatch, "```json\n" + json.dumps([valid_business, bad]) + "\n```")
        monkeypatch.setenv("SUGGESTION_MODEL", "llama3.2:3b")

        response = client.get(
            "/api/businesses/suggestions",
            params={"category": "Food", "city": "Jalandhar"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "category": "Food",
            "city": "Jalandhar",
            "validBusinesses": [valid_business],
            "errors": ["Business 2: rating must be <= 5"],
        }
        assert calls[0]["model"] == "llama3.2:3b"
        assert "Food businesses in Jalandhar" in calls[0]["user_prompt"]

    def test_missing_params_is_422(self, client: TestClient) -> None:
        response = client.get("/api/businesses/suggestions", params={"category": "Food"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_ollama_failure_is_502(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        self._patch_chat(monkeypatch, ollama.OllamaError("connection refused"))
        response = client.get(
            "/api/businesses/suggestions",
            params={"category": "Food", "city": "Pune"},
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json() == {"detail": "Failed to generate business suggestions."}

    def test_unparsable_reply_is_502(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        self._patch_chat(monkeypatch, "I cannot help with that.")
        response = client.get(
            "/api/businesses/suggestions",
            params={"category": "Food", "city": "Pune"},
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["detail"].startswith("Unusable model reply")

    def test_non_finite_generated_values_are_rejected(
        self,
        client: TestClient,
        monkeypatch: pytest.MonkeyPatch,
        valid_business: dict,
    ) -> None:
        reply = json.dumps([valid_business, {**valid_business, "latitude": float("inf")}])
        self._patch_chat(monkeypatch, reply)
        response = client.get(
            "/api/businesses/suggestions",
            params={"category": "Food", "city": "Jalandhar"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["validBusinesses"] == [valid_business]
        assert response.json()["errors"] == ["Business 2: latitude must be number"]
