"""Advisor router — /api endpoints used by the EduAdvisor web page."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.agents.chat_agent import ChatAgent
from app.agents.recommendation_agent import RecommendationAgent
from app.clients.gemini_client import GeminiClient, get_gemini_client
from app.config import get_settings
from app.errors import (
    AdvisorError,
    ConfigurationError,
    InputValidationError,
    TransportError,
)
from app.models.request_models import ChatRequest, InterestRequest
from app.models.response_models import (
    ChatResult,
    ErrorResponse,
    HealthResponse,
    RecommendationResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["advisor"])

RECOMMENDATIONS_CONFIG_ERROR = "Server configuration error: Missing API key for the AI service."
CHAT_CONFIG_ERROR = "Server configuration error."

# Configuration is checked before input on these paths, even for malformed bodies.
CONFIG_ERROR_MESSAGES = {
    "/api/recommendations": RECOMMENDATIONS_CONFIG_ERROR,
    "/api/chat": CHAT_CONFIG_ERROR,
}

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


# ── Endpoints ─────────────────────────────────────────────────────────────────


@router.post(
    "/recommendations",
    response_model=RecommendationResult,
    responses=_ERROR_RESPONSES,
)
async def recommend(
    req: InterestRequest,
    client: GeminiClient = Depends(get_gemini_client),
) -> RecommendationResult:
    """Return careers and hobbies that match the user's interests."""
    settings = get_settings()
    agent = RecommendationAgent(client, timeout=settings.recommendation_timeout)
    try:
        return await agent.recommend(req.interests)
    except ConfigurationError as exc:
        raise HTTPException(status_code=500, detail=RECOMMENDATIONS_CONFIG_ERROR) from exc
    except InputValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except AdvisorError as exc:
        _log_failure("recommendations", exc)
        raise HTTPException(
            status_code=500,
            detail="Failed to get recommendations from the AI. Please try again later.",
        ) from exc


@router.post("/chat", response_model=ChatResult, responses=_ERROR_RESPONSES)
async def chat(
    req: ChatRequest,
    client: GeminiClient = Depends(get_gemini_client),
) -> ChatResult:
    """Return the counselor's reply to the conversation so far."""
    settings = get_settings()
    agent = ChatAgent(client, timeout=settings.chat_timeout)
    try:
        return await agent.reply(req.history)
    except ConfigurationError as exc:
        raise HTTPException(status_code=500, detail=CHAT_CONFIG_ERROR) from exc
    except InputValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except AdvisorError as exc:
        _log_failure("chat", exc)
        raise HTTPException(
            status_code=500,
            detail="Failed to get a response from the AI counselor.",
        ) from exc


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple liveness probe."""
    return HealthResponse()


# ── Helpers ───────────────────────────────────────────────────────────────────


def _log_failure(endpoint: str, exc: AdvisorError) -> None:
    if isinstance(exc, TransportError):
        logger.error("%s: request error talking to Gemini: %s", endpoint, exc)
    else:
        logger.error("%s: %s: %s", endpoint, type(exc).__name__, exc)
