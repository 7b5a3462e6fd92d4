"""Gemini REST client.

Performs a single ``generateContent`` call and extracts the first candidate's
text. Transport failures and application failures are raised as distinct
error types so the caller can log them differently.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional

import httpx

from app.config import get_settings
from app.errors import ConfigurationError, TransportError, UpstreamApplicationError

logger = logging.getLogger(__name__)

GENERATE_CONTENT_PATH = "/models/{model}:generateContent"


class GeminiClient:
    """Thin async wrapper around the Gemini ``generateContent`` endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    # ── Public API ────────────────────────────────────────────────────────

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def ensure_configured(self) -> None:
        """Raise ConfigurationError if no API key was supplied."""
        if not self.is_configured:
            logger.error("GEMINI_API_KEY is not set — refusing to call the AI service.")
            raise ConfigurationError("Missing API key for the AI service.")

    async def generate_content(
        self, payload: dict[str, Any], timeout: Optional[float] = None
    ) -> str:
        """POST ``payload`` and return ``candidates[0].content.parts[0].text``.

        Parameters
        ----------
        payload : JSON-serialisable generateContent request body
        timeout : seconds before the call is aborted; None waits indefinitely
        """
        self.ensure_configured()

        url = self._base_url + GENERATE_CONTENT_PATH.format(model=self._model)

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                request = client.post(url, params={"key": self._api_key}, json=payload)
                if timeout is None:
                    resp = await request
                else:
                    # httpx timeouts are per phase; this bounds the whole call.
                    resp = await asyncio.wait_for(request, timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Gemini request error: no complete response within %.1fs", timeout)
            raise TransportError(f"Timed out after {timeout}s") from exc
        except httpx.TransportError as exc:
            logger.error("Gemini request error (%s): %s", type(exc).__name__, exc)
            raise TransportError(str(exc) or type(exc).__name__) from exc

        if not resp.is_success:
            logger.error(
                "Gemini application error — status=%d body=%s",
                resp.status_code,
                resp.text[:2000],
            )
            raise UpstreamApplicationError(
                f"Upstream returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except json.JSONDecodeError as exc:
            logger.error("Gemini returned a non-JSON body: %s", resp.text[:500])
            raise UpstreamApplicationError(
                "The AI returned an empty response.", status_code=resp.status_code
            ) from exc

        text = self._extract_text(data)
        if not text:
            logger.error(
                "Gemini returned an empty or invalid response structure: %s",
                json.dumps(data, ensure_ascii=False)[:2000],
            )
            raise UpstreamApplicationError(
                "The AI returned an empty response.", status_code=resp.status_code
            )
        return text

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _extract_text(data: Any) -> Optional[str]:
        """Walk ``candidates[0].content.parts[0].text``; None if any hop is missing."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None


def get_gemini_client() -> GeminiClient:
    """Build a client from the current settings (FastAPI dependency)."""
    settings = get_settings()
    return GeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
    )
