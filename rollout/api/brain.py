"""Advisor ("brain") proxy endpoints.

Forwards chat questions, with a snapshot of the dashboard, to the external
advisor service and normalizes what comes back. Each request is one
outbound call with no retry:
  - upstream 2xx          -> 200 {response, session_id, sources}
  - upstream non-2xx      -> status and body relayed verbatim
  - network error/timeout -> 503 {error: "brain_unavailable", upstream, detail}
"""

import logging
from typing import Any

import httpx
from fastapi import APIRouter, Body, Depends, HTTPException, Response
from fastapi.responses import JSONResponse

from rollout.api.deps import get_app_settings, get_brain_client, get_store
from rollout.core.brain_context import build_context_bundle, build_query_payload
from rollout.core.config import Settings
from rollout.core.logging import get_logger, log_with_context
from rollout.core.schemas_brain import BrainQueryRequest, BrainQueryResponse
from rollout.db.memory_store import MemoryStore
from rollout.services.brain_client import BrainClient, extract_answer

logger = get_logger(__name__)

router = APIRouter(prefix="/brain")

BRAIN_UNAVAILABLE = "brain_unavailable"


def _is_success(resp: httpx.Response) -> bool:
    return 200 <= resp.status_code < 300


def _relay(resp: httpx.Response) -> Response:
    """Pass an upstream response through unchanged."""
    return Response(
        content=resp.content,
        status_code=resp.status_code,
        media_type=resp.headers.get("content-type", "application/json"),
    )


def _unavailable(url: str, exc: Exception) -> JSONResponse:
    detail = str(exc) or exc.__class__.__name__
    log_with_context(logger, logging.WARNING, "Advisor unreachable", upstream=url, detail=detail)
    return JSONResponse(
        status_code=503,
        content={"error": BRAIN_UNAVAILABLE, "upstream": url, "detail": detail},
    )


@router.get("/health")
async def brain_health(brain: BrainClient = Depends(get_brain_client)) -> JSONResponse:
    """Probe the advisor with the short timeout."""
    url = brain.url("health")
    try:
        resp = await brain.health()
    except httpx.HTTPError as e:
        detail = str(e) or e.__class__.__name__
        logger.warning(f"Advisor health probe failed: {detail}")
        return JSONResponse(
            status_code=503,
            content={"ok": False, "upstream": url, "error": BRAIN_UNAVAILABLE, "detail": detail},
        )

    if not _is_success(resp):
        return JSONResponse(
            status_code=503,
            content={"ok": False, "upstream": url, "status": resp.status_code},
        )

    try:
        brain_info = resp.json()
    except ValueError:
        brain_info = None

    return JSONResponse(
        status_code=200,
        content={"ok": True, "upstream": url, "status": resp.status_code, "brain": brain_info},
    )


@router.post("/query", response_model=BrainQueryResponse)
async def brain_query(
    body: BrainQueryRequest,
    store: MemoryStore = Depends(get_store),
    brain: BrainClient = Depends(get_brain_client),
    settings: Settings = Depends(get_app_settings),
) -> Any:
    """
    Ask the advisor a question with the current dashboard as context.

    Args:
        body: Question text and/or image, optional session id

    Returns:
        Normalized answer, the upstream's error response, or a 503
    """
    need = (body.need or "").strip()
    image = body.image or None
    if not need and not image:
        raise HTTPException(status_code=400, detail="need or image is required")

    session_id = body.session_id or settings.BRAIN_SESSION_ID
    payload = build_query_payload(
        need=need,
        session_id=session_id,
        user_id=settings.BRAIN_USER_ID,
        context=build_context_bundle(store, image=image),
    )

    url = brain.url("query")
    try:
        resp = await brain.query(payload)
    except httpx.HTTPError as e:
        return _unavailable(url, e)

    if not _is_success(resp):
        log_with_context(
            logger, logging.WARNING, "Advisor returned an error", upstream=url, status=resp.status_code
        )
        return _relay(resp)

    try:
        data = resp.json()
    except ValueError:
        data = resp.text

    sources: list[Any] = []
    if isinstance(data, dict):
        upstream_session = data.get("session_id")
        if isinstance(upstream_session, str) and upstream_session:
            session_id = upstream_session
        if isinstance(data.get("sources"), list):
            sources = data["sources"]

    return BrainQueryResponse(response=extract_answer(data), session_id=session_id, sources=sources)


@router.post("/log_use")
async def brain_log_use(
    payload: Any = Body(None),
    brain: BrainClient = Depends(get_brain_client),
) -> Response:
    """Relay a usage event to the advisor's logging endpoint."""
    url = brain.url("log_use")
    try:
        resp = await brain.log_use(payload)
    except httpx.HTTPError as e:
        return _unavailable(url, e)
    return _relay(resp)
