"""API endpoints for rollout deliverables."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from rollout.api.deps import get_store
from rollout.core.logging import get_logger, log_with_context
from rollout.core.schemas_dashboard import DeliverableCreate, DeliverableOut, DeliverableUpdate
from rollout.db.memory_store import MemoryStore

logger = get_logger(__name__)

router = APIRouter(prefix="/deliverables")

NOT_FOUND = "Deliverable not found"


@router.get("", response_model=list[DeliverableOut])
async def list_deliverables(store: MemoryStore = Depends(get_store)) -> list[dict]:
    """List all deliverables."""
    return store.list_deliverables()


@router.get("/{deliverable_id}", response_model=DeliverableOut)
async def get_deliverable(
    deliverable_id: str = Path(..., description="Deliverable id"),
    store: MemoryStore = Depends(get_store),
) -> dict:
    """Get a single deliverable by id."""
    deliverable = store.get_deliverable(deliverable_id)
    if not deliverable:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return deliverable


@router.post("", response_model=DeliverableOut, status_code=201)
async def create_deliverable(
    body: DeliverableCreate,
    store: MemoryStore = Depends(get_store),
) -> dict:
    """Create a new deliverable (status defaults to draft)."""
    deliverable = store.create_deliverable(body.to_record())
    log_with_context(logger, logging.INFO, "Created deliverable", entity_id=deliverable["id"])
    return deliverable


@router.patch("/{deliverable_id}", response_model=DeliverableOut)
async def update_deliverable(
    body: DeliverableUpdate,
    deliverable_id: str = Path(..., description="Deliverable id"),
    store: MemoryStore = Depends(get_store),
) -> dict:
    """Update a deliverable, e.g. moving it from draft to review."""
    updates = body.to_record()
    deliverable = store.update_deliverable(deliverable_id, updates)
    if not deliverable:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(
        logger, logging.INFO, "Updated deliverable", entity_id=deliverable_id, fields=sorted(updates)
    )
    return deliverable


@router.delete("/{deliverable_id}", status_code=204)
async def delete_deliverable(
    deliverable_id: str = Path(..., description="Deliverable id"),
    store: MemoryStore = Depends(get_store),
) -> Response:
    if not store.delete_deliverable(deliverable_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(logger, logging.INFO, "Deleted deliverable", entity_id=deliverable_id)
    return Response(status_code=204)
