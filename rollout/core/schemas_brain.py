"""Pydantic schemas for the advisor (brain) proxy."""

from typing import Any

from pydantic import BaseModel, Field


class BrainQueryRequest(BaseModel):
    """Question from the dashboard chat sidebar."""

    need: str | None = Field(None, description="Free-text question")
    session_id: str | None = Field(None, description="Advisor session to continue")
    image: str | None = Field(None, description="Optional image payload (data URL or base64)")


class BrainQueryResponse(BaseModel):
    """Normalized advisor answer."""

    response: str
    session_id: str
    sources: list[Any] = Field(default_factory=list)
