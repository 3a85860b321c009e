"""Parse model output into typed results."""

from __future__ import annotations

import json
import re

from pydantic import ValidationError

from feynsight.models.diagram import TheoristResult

_JSON_BLOCK_RE = re.compile(r"```(?:json)?\s*\n(.*?)\n```", re.DOTALL)
_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)

TASKS = ("ANALYZE_THEORY", "PLAN_TOPOLOGY", "CHAT")


class ModelOutputError(ValueError):
    """The model answered, but not in the expected shape."""


def parse_theorist_output(text: str) -> TheoristResult:
    """Parse the theorist's JSON answer.

    Supports:
    1. Direct JSON output
    2. JSON embedded in a markdown code block
    3. JSON surrounded by prose (outermost braces)
    """
    block = _JSON_BLOCK_RE.search(text)
    if block:
        text = block.group(1)
    else:
        obj = _JSON_OBJECT_RE.search(text)
        if obj:
            text = obj.group(0)

    try:
        return TheoristResult.model_validate(json.loads(text.strip()))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ModelOutputError(f"Unusable theorist output: {e}") from e


def parse_task(text: str) -> str:
    """Intent classification; anything unrecognised is treated as chat."""
    answer = text.strip().strip('"').upper()
    return answer if answer in TASKS else "CHAT"
