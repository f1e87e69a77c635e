"""
Business record validation.

Candidate records (usually LLM output) are checked field by field against a
fixed rule table before anything downstream touches them.

Behavior:
- every rule runs for every record; violations are collected, not short-circuited
- a missing/None/"" required value yields one "<field> is required" and nothing else
- type errors are reported, then only checks matching the actual value shape run
- rejected records produce one "Business <n>: ..." line (n is 1-based)
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple


class InputShapeError(ValueError):
    pass


@dataclass(frozen=True)
class FieldRule:
    field: str
    type: str
    required: bool = False
    max_length: int | None = None
    enum: tuple[str, ...] | None = None
    min_value: float | None = None
    max_value: float | None = None

    def check(self, value: Any) -> list[str]:
        if value is None or value == "":
            return [f"{self.field} is required"] if self.required else []

        if self.type == "string":
            if not isinstance(value, str):
                return [f"{self.field} must be string"]
            return self._check_string(value)

        if not _is_number(value):
            return [f"{self.field} must be number"]
        return self._check_number(value)

    def _check_string(self, value: str) -> list[str]:
        violations: list[str] = []
        if self.max_length is not None and len(value) > self.max_length:
            violations.append(f"{self.field} too long (max {self.max_length})")
        if self.enum is not None and value not in self.enum:
            violations.append(f"{self.field} must be one of: {', '.join(self.enum)}")
        return violations

    def _check_number(self, value: float) -> list[str]:
        violations: list[str] = []
        if self.min_value is not None and value < self.min_value:
            violations.append(f"{self.field} must be >= {self.min_value}")
        if self.max_value is not None and value > self.max_value:
            violations.append(f"{self.field} must be <= {self.max_value}")
        return violations


class ValidationOutcome(NamedTuple):
    valid_businesses: list[dict[str, Any]]
    errors: list[str]

    def as_dict(self) -> dict[str, Any]:
        return {"validBusinesses": self.valid_businesses, "errors": self.errors}


BUSINESS_TYPES = ("retail", "commercial", "service")

BUSINESS_RULES: tuple[FieldRule, ...] = (
    FieldRule("name", "string", required=True, max_length=255),
    FieldRule("category", "string", required=True, max_length=100),
    FieldRule("type", "string", required=True, enum=BUSINESS_TYPES),
    FieldRule("city", "string", required=True, max_length=100),
    FieldRule("rating", "number", required=True, min_value=0, max_value=5),
    FieldRule("latitude", "number", required=True, min_value=-90, max_value=90),
    FieldRule("longitude", "number", required=True, min_value=-180, max_value=180),
)


def _is_number(value: Any) -> bool:
    # JSON true/false must not pass as 1/0; NaN/Infinity slip past every bound.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def record_violations(record: Any, rules: tuple[FieldRule, ...] = BUSINESS_RULES) -> list[str]:
    """
    Return every violation for one record, in rule-table order.

    Non-mapping records are treated as having no fields at all.
    """
    fields = record if isinstance(record, Mapping) else {}
    violations: list[str] = []
    for rule in rules:
        violations.extend(rule.check(fields.get(rule.field)))
    return violations


def validate_business_data(
    records: Any,
    rules: tuple[FieldRule, ...] = BUSINESS_RULES,
) -> ValidationOutcome:
    """
    Split `records` into accepted records and per-record error lines.
    """
    if not isinstance(records, (list, tuple)):
        raise InputShapeError("Expected an array of businesses.")

    valid_businesses: list[dict[str, Any]] = []
    errors: list[str] = []
    for index, record in enumerate(records):
        violations = record_violations(record, rules)
        if violations:
            errors.append(f"Business {index + 1}: {', '.join(violations)}")
        else:
            valid_businesses.append(record)

    return ValidationOutcome(valid_businesses=valid_businesses, errors=errors)
