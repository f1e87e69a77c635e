"""
Ollama HTTP client helpers.

Used endpoint:
- POST /api/chat        -> {"message": {"role": "assistant", "content": "..."}}
"""

from __future__ import annotations

from typing import Any

import httpx

# Ollama failures are explicit and separable from other runtime errors.
class OllamaError(RuntimeError):
    pass


def _normalize_base_url(base_url: str) -> str:
    base_url = (base_url or "").strip()
    if not base_url:
        raise OllamaError("OLLAMA_BASE_URL is empty.")
    return base_url.rstrip("/")


async def chat_text(
    *,
    base_url: str,
    model: str,
    system_prompt: str,
    user_prompt: str,
    timeout_s: float = 120.0,
    temperature: float | None = None,
) -> str:
    """
    Generate one assistant message from Ollama chat API.
    """
    base_url = _normalize_base_url(base_url)
    model = (model or "").strip()
    if not model:
        raise OllamaError("Generation model name is empty.")

    payload: dict[str, Any] = {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        "stream": False,
    }
    if temperature is not None:
        payload["options"] = {"temperature": float(temperature)}

    try:
        async with httpx.AsyncClient(base_url=base_url, timeout=timeout_s) as client:
            resp = await client.post("/api/chat", json=payload)
    except httpx.HTTPError as exc:
        raise OllamaError(f"Ollama chat request failed: {exc}") from exc

    if resp.status_code != 200:
        # Avoid dumping huge bodies; include a small snippet.
        body = resp.text[:500]
        raise OllamaError(f"Ollama chat request failed: {resp.status_code} {body}")

    data: dict[str, Any] = resp.json()
    message = data.get("message")
    if isinstance(message, dict):
        content = message.get("content")
        if isinstance(content, str) and content.strip():
            return content.strip()

    response_text = data.get("response")
    if isinstance(response_text, str) and response_text.strip():
        return response_text.strip()

    raise OllamaError("Ollama returned an empty chat response.")
