"""API endpoints for initiatives (agents, workflows, integrations)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from rollout.api.deps import get_store
from rollout.core.logging import get_logger, log_with_context
from rollout.core.schemas_dashboard import InitiativeCreate, InitiativeOut, InitiativeUpdate
from rollout.db.memory_store import MemoryStore

logger = get_logger(__name__)

router = APIRouter(prefix="/initiatives")

NOT_FOUND = "Initiative not found"


@router.get("", response_model=list[InitiativeOut])
async def list_initiatives(store: MemoryStore = Depends(get_store)) -> list[dict]:
    """List all initiatives."""
    return store.list_initiatives()


@router.get("/{initiative_id}", response_model=InitiativeOut)
async def get_initiative(
    initiative_id: str = Path(..., description="Initiative id"),
    store: MemoryStore = Depends(get_store),
) -> dict:
    """Get a single initiative by id."""
    initiative = store.get_initiative(initiative_id)
    if not initiative:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return initiative


@router.post("", response_model=InitiativeOut, status_code=201)
async def create_initiative(
    body: InitiativeCreate,
    store: MemoryStore = Depends(get_store),
) -> dict:
    """
    Create a new initiative.

    Args:
        body: Initiative data; status defaults to pending

    Returns:
        Created initiative
    """
    initiative = store.create_initiative(body.to_record())
    log_with_context(logger, logging.INFO, "Created initiative", entity_id=initiative["id"])
    return initiative


@router.patch("/{initiative_id}", response_model=InitiativeOut)
async def update_initiative(
    body: InitiativeUpdate,
    initiative_id: str = Path(..., description="Initiative id"),
    store: MemoryStore = Depends(get_store),
) -> dict:
    """
    Update an initiative. Start/stop toggles go through here as status changes.

    Args:
        body: Fields to update (at least one)
        initiative_id: Initiative id

    Returns:
        Updated initiative
    """
    updates = body.to_record()
    initiative = store.update_initiative(initiative_id, updates)
    if not initiative:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(
        logger, logging.INFO, "Updated initiative", entity_id=initiative_id, fields=sorted(updates)
    )
    return initiative


@router.delete("/{initiative_id}", status_code=204)
async def delete_initiative(
    initiative_id: str = Path(..., description="Initiative id"),
    store: MemoryStore = Depends(get_store),
) -> Response:
    """Delete an initiative."""
    if not store.delete_initiative(initiative_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(logger, logging.INFO, "Deleted initiative", entity_id=initiative_id)
    return Response(status_code=204)
