"""API endpoints for franchise groups in the rollout."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from rollout.api.deps import get_store
from rollout.core.logging import get_logger, log_with_context
from rollout.core.schemas_dashboard import (
    FranchiseGroupCreate,
    FranchiseGroupOut,
    FranchiseGroupUpdate,
)
from rollout.db.memory_store import MemoryStore

logger = get_logger(__name__)

router = APIRouter(prefix="/franchise-groups")

NOT_FOUND = "Franchise group not found"


@router.get("", response_model=list[FranchiseGroupOut])
async def list_franchise_groups(store: MemoryStore = Depends(get_store)) -> list[dict]:
    """List all franchise groups."""
    return store.list_franchise_groups()


@router.get("/{group_id}", response_model=FranchiseGroupOut)
async def get_franchise_group(
    group_id: str = Path(..., description="Franchise group id"),
    store: MemoryStore = Depends(get_store),
) -> dict:
    """Get a single franchise group by id."""
    group = store.get_franchise_group(group_id)
    if not group:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return group


@router.post("", response_model=FranchiseGroupOut, status_code=201)
async def create_franchise_group(
    body: FranchiseGroupCreate,
    store: MemoryStore = Depends(get_store),
) -> dict:
    """
    Create a new franchise group.

    Args:
        body: Franchise group data; progress and locationCount default to 0

    Returns:
        Created franchise group
    """
    group = store.create_franchise_group(body.to_record())
    log_with_context(logger, logging.INFO, "Created franchise group", entity_id=group["id"])
    return group


@router.patch("/{group_id}", response_model=FranchiseGroupOut)
async def update_franchise_group(
    body: FranchiseGroupUpdate,
    group_id: str = Path(..., description="Franchise group id"),
    store: MemoryStore = Depends(get_store),
) -> dict:
    """
    Update a franchise group.

    Args:
        body: Fields to update (at least one)
        group_id: Franchise group id

    Returns:
        Updated franchise group
    """
    updates = body.to_record()
    group = store.update_franchise_group(group_id, updates)
    if not group:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(
        logger, logging.INFO, "Updated franchise group", entity_id=group_id, fields=sorted(updates)
    )
    return group


@router.delete("/{group_id}", status_code=204)
async def delete_franchise_group(
    group_id: str = Path(..., description="Franchise group id"),
    store: MemoryStore = Depends(get_store),
) -> Response:
    """Delete a franchise group. Issues referencing it keep their franchiseGroupId."""
    if not store.delete_franchise_group(group_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(logger, logging.INFO, "Deleted franchise group", entity_id=group_id)
    return Response(status_code=204)
