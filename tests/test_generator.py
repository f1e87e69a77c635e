"""Unit tests for parsing LLM business suggestions."""

from __future__ import annotations

import pytest

from ingestion.generator import build_suggestion_prompt, parse_candidates
from ingestion.validation import InputShapeError


class TestParseCandidates:
    def test_bare_array(self) -> None:
        assert parse_candidates('[{"name": "A"}]') == [{"name": "A"}]

    def test_fenced_array(self) -> None:
        reply = 'Here you go:\n```json\n[{"name": "A"}, {"name": "B"}]\n```'
        assert parse_candidates(reply) == [{"name": "A"}, {"name": "B"}]

    def test_envelope_object(self) -> None:
        assert parse_candidates('{"businesses": [{"name": "A"}]}') == [{"name": "A"}]

    def test_array_surrounded_by_prose(self) -> None:
        reply = 'Sure! [{"name": "A"}] Let me know if you need more.'
        assert parse_candidates(reply) == [{"name": "A"}]

    @pytest.mark.parametrize("reply", ["", "   ", "no json here", '{"name": "A"}', "[not json]"])
    def test_unusable_reply_raises(self, reply: str) -> None:
        with pytest.raises(InputShapeError):
            parse_candidates(reply)


def test_prompt_names_every_field_and_type() -> None:
    prompt = build_suggestion_prompt("Cafe", "Pune", count=3)
    assert prompt.startswith("Generate 3 real Cafe businesses in Pune.")
    for field in ("name", "category", "type", "city", "rating", "latitude", "longitude"):
        assert field in prompt
    assert "retail, commercial, service" in prompt
