"""Parsing of JSON objects out of model text output."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

_GREEDY_OBJECT = re.compile(r"\{[\s\S]*\}")


class ParseOutcome(str, Enum):
    PARSED = "parsed"
    UNPARSEABLE = "unparseable"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing model output; ``raw`` is always the original text."""

    outcome: ParseOutcome
    raw: str
    data: Optional[Dict[str, Any]] = None

    @property
    def parsed(self) -> bool:
        return self.outcome is ParseOutcome.PARSED


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return None
    return value if isinstance(value, dict) else None


def _first_balanced_object(text: str) -> Optional[Dict[str, Any]]:
    start = text.find("{")
    if start == -1:
        return None
    try:
        value, _ = json.JSONDecoder().raw_decode(text, start)
    except (json.JSONDecodeError, ValueError):
        return None
    return value if isinstance(value, dict) else None


def parse_model_json(text: Optional[str]) -> ParseResult:
    """
    Parse a JSON object from model output.

    Tries a strict parse first, then recovers an object wrapped in prose:
    the widest ``{...}`` span, then the first balanced object.
    """
    raw = text or ""

    data = _loads_object(raw)
    if data is None:
        match = _GREEDY_OBJECT.search(raw)
        if match:
            data = _loads_object(match.group(0))
    if data is None:
        data = _first_balanced_object(raw)

    if data is None:
        return ParseResult(ParseOutcome.UNPARSEABLE, raw)
    return ParseResult(ParseOutcome.PARSED, raw, data)
