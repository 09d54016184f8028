"""Decision log schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

DECISION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "decided_at",
        "layer",
        "keyword_hit",
        "default_index",
        "words_checked",
        "response",
    ],
    "properties": {
        "decided_at": {"type": "string", "format": "date-time"},
        "layer": {"type": "string", "enum": ["keyword", "default"]},
        "keyword_hit": {"type": ["string", "null"]},
        "default_index": {"type": ["integer", "null"], "minimum": 0},
        "words_checked": {"type": "integer", "minimum": 0},
        "response": {"type": "string"},
    },
    "allOf": [
        {
            "if": {"properties": {"layer": {"const": "keyword"}}},
            "then": {
                "properties": {
                    "keyword_hit": {"type": "string"},
                    "default_index": {"type": "null"},
                }
            },
        },
        {
            "if": {"properties": {"layer": {"const": "default"}}},
            "then": {
                "properties": {
                    "keyword_hit": {"type": "null"},
                    "default_index": {"type": "integer"},
                }
            },
        },
    ],
}

_validator = Draft7Validator(DECISION_SCHEMA)


def validate_decision(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"decision log validation failed: {messages}")


@dataclass
class DecisionLogRecord:
    layer: str
    keyword_hit: Optional[str]
    default_index: Optional[int]
    words_checked: int
    response: str
    decided_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "decided_at": self.decided_at,
            "layer": self.layer,
            "keyword_hit": self.keyword_hit,
            "default_index": self.default_index,
            "words_checked": self.words_checked,
            "response": self.response,
        }
        validate_decision(payload)
        return payload
