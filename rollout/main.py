"""FastAPI application entry point."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rollout.api import router as api_router
from rollout.core.config import Settings, get_settings
from rollout.core.logging import get_logger
from rollout.core.validation import validation_error_body
from rollout.db.memory_store import MemoryStore
from rollout.db.seed import seed_store
from rollout.services.brain_client import BrainClient

logger = get_logger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException as {"error": ...} instead of {"detail": ...}."""
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(content=content, status_code=exc.status_code, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed payloads with 400 and one detail entry per field."""
    body = validation_error_body(exc.errors())
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {body['details']}")
    return JSONResponse(content=body, status_code=400)


def create_app(
    store: MemoryStore | None = None,
    brain_client: BrainClient | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the application around an explicitly constructed store.

    Args:
        store: Entity store; a new one (seeded if SEED_DATA) when omitted
        brain_client: Advisor client; built from settings when omitted
        settings: Settings; the cached environment settings when omitted

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    if store is None:
        store = MemoryStore()
        if settings.SEED_DATA:
            seed_store(store)

    app = FastAPI(
        title="Franchise Rollout Dashboard",
        description="Rollout tracking for initiatives, franchise groups, deliverables and issues",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.store = store
    app.state.brain_client = brain_client or BrainClient.from_settings(settings)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Health check endpoint."""
        return JSONResponse(content={"status": "ok"}, status_code=200)

    app.include_router(api_router, prefix="/api")

    logger.info(f"Rollout dashboard ready (advisor upstream {settings.BRAIN_URL})")
    return app


app = create_app()
