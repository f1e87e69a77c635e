"""
Ingestion "service layer".

This file contains logic that is independent of FastAPI's routing layer:
- dry-run validation of candidate payloads
- generating candidates via Ollama and validating them

Nothing here writes to the database.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException

from core import ollama, settings

from . import generator
from .validation import InputShapeError, ValidationOutcome, validate_business_data

logger = logging.getLogger(__name__)


def validate_payload(payload: Any) -> ValidationOutcome:
    try:
        outcome = validate_business_data(payload)
    except InputShapeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if outcome.errors:
        logger.info(
            "validation_rejected accepted=%s rejected=%s",
            len(outcome.valid_businesses),
            len(outcome.errors),
        )
    return outcome


async def suggest_businesses(category: str, city: str) -> dict[str, Any]:
    category = (category or "").strip()
    city = (city or "").strip()
    if not category or not city:
        raise HTTPException(status_code=422, detail="Category and city required.")

    prompt = generator.build_suggestion_prompt(category, city, count=settings.suggestion_count())
    try:
        reply = await ollama.chat_text(
            base_url=settings.ollama_base_url(),
            model=settings.suggestion_model(),
            system_prompt=generator.SYSTEM_PROMPT,
            user_prompt=prompt,
            timeout_s=settings.suggestion_timeout_s(),
        )
    except ollama.OllamaError as exc:
        logger.exception("suggestion_generation_failed category=%s city=%s", category, city)
        raise HTTPException(status_code=502, detail="Failed to generate business suggestions.") from exc

    try:
        candidates = generator.parse_candidates(reply)
        outcome = validate_business_data(candidates)
    except InputShapeError as exc:
        logger.warning("suggestion_unparsable category=%s city=%s reason=%s", category, city, exc)
        raise HTTPException(status_code=502, detail=f"Unusable model reply: {exc}") from exc

    logger.info(
        "suggestion_complete category=%s city=%s accepted=%s rejected=%s",
        category,
        city,
        len(outcome.valid_businesses),
        len(outcome.errors),
    )
    return {"category": category, "city": city, **outcome.as_dict()}
