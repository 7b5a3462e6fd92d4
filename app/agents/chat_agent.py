"""Chat Agent — relays a caller-managed conversation to the "Eva" persona."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from app.clients.gemini_client import GeminiClient
from app.errors import InputValidationError
from app.models.request_models import Turn
from app.models.response_models import ChatResult
from app.prompts.chat_prompt import CHAT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class ChatAgent:
    """Stateless agent; the full history arrives with every request."""

    def __init__(self, client: GeminiClient, timeout: Optional[float] = None) -> None:
        self._client = client
        self._timeout = timeout

    async def reply(self, history: Optional[Sequence[Turn]]) -> ChatResult:
        """Return the counselor's next message for ``history``."""
        self._client.ensure_configured()

        if history is None:
            raise InputValidationError("Chat history is required.")

        payload = self.build_payload(history)
        logger.debug("Chat request with %d turn(s)", len(history))
        text = await self._client.generate_content(payload, timeout=self._timeout)
        return ChatResult(message=text)

    @staticmethod
    def build_payload(history: Sequence[Turn]) -> dict[str, Any]:
        """Forward each turn's role and parts unchanged, in order."""
        contents = [turn.to_wire() for turn in history]
        return {
            "contents": contents,
            "systemInstruction": {
                "parts": [{"text": CHAT_SYSTEM_PROMPT}],
            },
        }
