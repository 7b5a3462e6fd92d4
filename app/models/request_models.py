"""Request models for the EduAdvisor API."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


class InterestRequest(BaseModel):
    """Free-text interests submitted from the recommendation form."""

    # Optional so a missing value is reported as "Interests are required."
    # instead of a schema error.
    interests: Optional[str] = Field(
        default=None,
        description="The user's interests, in their own words",
        examples=["I love coding, solving puzzles and playing the guitar."],
    )


class _KeyOrderedModel(BaseModel):
    """Remembers the key order of the validated input so it can be replayed."""

    _key_order: list[str] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler: Any) -> Any:
        model = handler(data)
        if isinstance(data, dict):
            model._key_order = list(data)
        return model

    def _wire_fields(self) -> dict[str, Any]:
        return self.model_dump()

    def to_wire(self) -> dict[str, Any]:
        """Dump in the caller's original key order."""
        data = self._wire_fields()
        ordered = {key: data[key] for key in self._key_order if key in data}
        ordered.update((key, value) for key, value in data.items() if key not in ordered)
        return ordered


class Part(_KeyOrderedModel):
    """One content part of a conversation turn."""

    # Unknown part keys are forwarded to the upstream untouched.
    model_config = ConfigDict(extra="allow")

    text: str


class Turn(_KeyOrderedModel):
    """A single conversation turn, in Gemini ``contents`` shape."""

    role: str = Field(..., examples=["user", "model"])
    parts: list[Part]

    def _wire_fields(self) -> dict[str, Any]:
        return {"role": self.role, "parts": [part.to_wire() for part in self.parts]}


class ChatRequest(BaseModel):
    """Caller-managed conversation history for the chat counselor."""

    history: Optional[list[Turn]] = Field(
        default=None,
        description="Full conversation so far, oldest first",
    )
