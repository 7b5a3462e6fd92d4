"""Normalisation of raw model text before JSON parsing.

Even with ``responseMimeType: application/json`` the model occasionally wraps
its answer in a markdown code fence, so fences are stripped first.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from app.errors import ResponseFormatError

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```[\w+-]*[ \t]*\n?(.*?)\n?```$", re.DOTALL)


def strip_markdown_fences(text: str) -> str:
    """Remove one surrounding ```` ``` ```` / ```` ```json ```` fence, if present."""
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    if match:
        return match.group(1).strip()
    return stripped


def parse_json_object(text: str) -> dict[str, Any]:
    """Parse model text into a JSON object, raising ResponseFormatError otherwise."""
    cleaned = strip_markdown_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse model output as JSON: %s", cleaned[:200])
        raise ResponseFormatError(f"Model output is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        logger.error("Model output is JSON but not an object: %s", type(data).__name__)
        raise ResponseFormatError("Model output is not a JSON object.")
    return data
