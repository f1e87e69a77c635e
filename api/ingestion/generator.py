"""
LLM-backed business suggestions.

The model is asked for a JSON array of candidate businesses. Replies are
often wrapped in Markdown fences or an envelope object, so parsing accepts:
- a bare JSON array
- a ```json fenced array
- {"businesses": [...]}
"""

from __future__ import annotations

import json
import re
from typing import Any

from .validation import BUSINESS_RULES, BUSINESS_TYPES, InputShapeError

SYSTEM_PROMPT = (
    "You generate structured business directory entries. "
    "Reply with JSON only. No explanations, no Markdown."
)

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def build_suggestion_prompt(category: str, city: str, *, count: int = 5) -> str:
    fields = ", ".join(rule.field for rule in BUSINESS_RULES)
    return (
        f"Generate {count} real {category} businesses in {city}. "
        f"Return ONLY a valid JSON array of objects with exact fields: {fields}. "
        f"`type` must be one of: {', '.join(BUSINESS_TYPES)}. "
        "`rating` is a number from 0 to 5; `latitude` and `longitude` are decimal degrees."
    )


def _strip_fence(text: str) -> str:
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return text


def parse_candidates(text: str) -> list[Any]:
    """
    Extract the candidate array from a model reply.
    """
    raw = _strip_fence((text or "").strip())
    if not raw:
        raise InputShapeError("Model reply is empty.")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        # Fall back to the outermost [...] span (model added prose around it).
        start, end = raw.find("["), raw.rfind("]")
        if start == -1 or end <= start:
            raise InputShapeError("Model reply is not JSON.") from None
        try:
            data = json.loads(raw[start : end + 1])
        except json.JSONDecodeError as exc:
            raise InputShapeError("Model reply is not JSON.") from exc

    if isinstance(data, dict) and isinstance(data.get("businesses"), list):
        data = data["businesses"]
    if not isinstance(data, list):
        raise InputShapeError("Model must return an array of businesses.")
    return data
