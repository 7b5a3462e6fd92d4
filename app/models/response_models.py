"""Response models for the EduAdvisor API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CareerEntry(BaseModel):
    """One recommended career path."""

    model_config = ConfigDict(extra="allow")

    career: str = Field(..., description="Name of the career")
    studies: list[str] = Field(..., description="Subjects or fields to study (3 expected)")
    icon: str = Field(..., description="Font Awesome 6 free icon classes", examples=["fas fa-code"])


class HobbyEntry(BaseModel):
    """One recommended hobby."""

    model_config = ConfigDict(extra="allow")

    hobby: str = Field(..., description="Name of the hobby")
    description: str = Field(..., description="Short, encouraging description")
    icon: str = Field(..., description="Font Awesome 6 free icon classes", examples=["fas fa-camera-retro"])


class RecommendationResult(BaseModel):
    """Response returned by POST /api/recommendations."""

    model_config = ConfigDict(extra="allow")

    careers: list[CareerEntry]
    hobbies: list[HobbyEntry]


class ChatResult(BaseModel):
    """Response returned by POST /api/chat."""

    message: str


class ErrorResponse(BaseModel):
    """Uniform error body for every failed request."""

    error: str


class HealthResponse(BaseModel):
    """Health-check response."""

    status: str = "ok"
    version: str = "1.0.0"
