"""Recommendation Agent — turns free-text interests into careers and hobbies.

One structured-output call to Gemini per request:
1. Check the API key, then the interests text (no network call on failure)
2. Send the fixed advisor prompt as system instruction, interests as user content
3. Strip markdown fences, parse JSON, validate the careers / hobbies shape
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from app.agents.output_parser import parse_json_object
from app.clients.gemini_client import GeminiClient
from app.errors import InputValidationError, ResponseFormatError
from app.models.response_models import RecommendationResult
from app.prompts.recommendation_prompt import (
    CAREER_COUNT_RANGE,
    HOBBY_COUNT_RANGE,
    RECOMMENDATION_SYSTEM_PROMPT,
    STUDIES_PER_CAREER,
    build_recommendation_user_prompt,
)

logger = logging.getLogger(__name__)


class RecommendationAgent:
    """Stateless agent that produces one RecommendationResult per call."""

    def __init__(self, client: GeminiClient, timeout: Optional[float] = 15.0) -> None:
        self._client = client
        self._timeout = timeout

    # ── Public API ────────────────────────────────────────────────────────

    async def recommend(self, interests: Optional[str]) -> RecommendationResult:
        """Return careers and hobbies for the given interests.

        Raises
        ------
        ConfigurationError        no API key
        InputValidationError      interests missing or blank
        TransportError            no response within the timeout
        UpstreamApplicationError  bad status, empty candidate, or bad shape
        """
        self._client.ensure_configured()

        if not isinstance(interests, str) or not interests.strip():
            raise InputValidationError("Interests are required.")

        payload = self.build_payload(interests)
        raw = await self._client.generate_content(payload, timeout=self._timeout)
        data = parse_json_object(raw)
        return validate_recommendations(data)

    @staticmethod
    def build_payload(interests: str) -> dict[str, Any]:
        """Build the generateContent body for a recommendation request."""
        return {
            "contents": [
                {"parts": [{"text": build_recommendation_user_prompt(interests)}]},
            ],
            "systemInstruction": {
                "parts": [{"text": RECOMMENDATION_SYSTEM_PROMPT}],
            },
            "generationConfig": {
                "responseMimeType": "application/json",
            },
        }


def validate_recommendations(data: dict[str, Any]) -> RecommendationResult:
    """Check that parsed model output matches the careers / hobbies schema."""
    for key in ("careers", "hobbies"):
        if not isinstance(data.get(key), list):
            logger.error("Model output is missing a '%s' array: keys=%s", key, sorted(data))
            raise ResponseFormatError(f"Model output has no '{key}' array.")

    try:
        result = RecommendationResult.model_validate(data)
    except ValidationError as exc:
        logger.error("Model output failed schema validation: %s", exc)
        raise ResponseFormatError("Model output does not match the recommendation schema.") from exc

    _warn_on_counts(result)
    return result


def _warn_on_counts(result: RecommendationResult) -> None:
    """Log entry counts that fall outside what the prompt asked for."""
    lo, hi = CAREER_COUNT_RANGE
    if not lo <= len(result.careers) <= hi:
        logger.warning("Expected %d-%d careers, got %d", lo, hi, len(result.careers))
    lo, hi = HOBBY_COUNT_RANGE
    if not lo <= len(result.hobbies) <= hi:
        logger.warning("Expected %d-%d hobbies, got %d", lo, hi, len(result.hobbies))
    for entry in result.careers:
        if len(entry.studies) != STUDIES_PER_CAREER:
            logger.warning(
                "Career %r lists %d studies (expected %d)",
                entry.career, len(entry.studies), STUDIES_PER_CAREER,
            )
