"""Error taxonomy shared by the upstream client and the advisor agents.

Every error is caught at the route boundary and turned into a uniform
``{"error": ...}`` body; the details carried here are for the server log only.
"""

from __future__ import annotations

from typing import Optional


class AdvisorError(Exception):
    """Base class for all request-scoped failures."""


class ConfigurationError(AdvisorError):
    """The Gemini API key is not configured."""


class InputValidationError(AdvisorError):
    """Caller input failed a shape or non-emptiness check."""


class TransportError(AdvisorError):
    """No response was received from the upstream API (timeout, reset, DNS…)."""


class UpstreamApplicationError(AdvisorError):
    """The upstream answered, but not with something usable."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseFormatError(UpstreamApplicationError):
    """Upstream text could not be parsed, or did not match the expected schema."""
