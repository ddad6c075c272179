"""HTTP client for the external advisor ("brain") service.

Uses httpx for async requests. Each call opens its own client with the
timeout for that endpoint: queries may sit behind an LLM call and get a
generous timeout, health probes and usage logging get a short one.
No retries; failures surface as ``httpx.HTTPError`` for the caller to map.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from rollout.core.config import Settings, get_settings
from rollout.core.logging import get_logger

logger = get_logger(__name__)

# Upstream field names that may carry the answer text, in priority order
ANSWER_FIELDS = ("response", "answer", "message", "text", "output")


def extract_answer(data: Any) -> str:
    """Pick the answer text out of whichever field the upstream populated."""
    if isinstance(data, str):
        return data
    if isinstance(data, dict):
        for key in ANSWER_FIELDS:
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return json.dumps(data)


class BrainClient:
    """Talks to the advisor service's /query, /health and /log_use endpoints."""

    def __init__(
        self,
        base_url: str,
        query_timeout: float = 15.0,
        health_timeout: float = 1.5,
        log_timeout: float = 1.5,
    ):
        self.base_url = base_url.rstrip("/")
        self.query_timeout = query_timeout
        self.health_timeout = health_timeout
        self.log_timeout = log_timeout

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> BrainClient:
        settings = settings or get_settings()
        return cls(
            base_url=settings.BRAIN_URL,
            query_timeout=settings.BRAIN_QUERY_TIMEOUT,
            health_timeout=settings.BRAIN_HEALTH_TIMEOUT,
            log_timeout=settings.BRAIN_LOG_TIMEOUT,
        )

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def query(self, payload: dict[str, Any]) -> httpx.Response:
        """POST a question with its context bundle."""
        async with httpx.AsyncClient(timeout=self.query_timeout) as client:
            resp = await client.post(self.url("query"), json=payload)
            logger.debug(f"Advisor query answered {resp.status_code}")
            return resp

    async def health(self) -> httpx.Response:
        """Probe the advisor's health endpoint."""
        async with httpx.AsyncClient(timeout=self.health_timeout) as client:
            return await client.get(self.url("health"))

    async def log_use(self, payload: Any) -> httpx.Response:
        """Relay a usage event to the advisor's logging endpoint."""
        async with httpx.AsyncClient(timeout=self.log_timeout) as client:
            return await client.post(self.url("log_use"), json=payload)
