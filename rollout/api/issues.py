"""API endpoints for rollout issues."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from rollout.api.deps import get_store
from rollout.core.logging import get_logger, log_with_context
from rollout.core.schemas_dashboard import IssueCreate, IssueOut, IssueUpdate
from rollout.db.memory_store import MemoryStore

logger = get_logger(__name__)

router = APIRouter(prefix="/issues")

NOT_FOUND = "Issue not found"


@router.get("", response_model=list[IssueOut])
async def list_issues(store: MemoryStore = Depends(get_store)) -> list[dict]:
    """List all issues."""
    return store.list_issues()


@router.get("/{issue_id}", response_model=IssueOut)
async def get_issue(
    issue_id: str = Path(..., description="Issue id"),
    store: MemoryStore = Depends(get_store),
) -> dict:
    """Get a single issue by id."""
    issue = store.get_issue(issue_id)
    if not issue:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return issue


@router.post("", response_model=IssueOut, status_code=201)
async def create_issue(
    body: IssueCreate,
    store: MemoryStore = Depends(get_store),
) -> dict:
    """
    Create a new issue.

    franchiseGroupId is stored as given; it is not checked against
    existing franchise groups.

    Args:
        body: Issue data; priority defaults to medium, status to open

    Returns:
        Created issue
    """
    issue = store.create_issue(body.to_record())
    log_with_context(logger, logging.INFO, "Created issue", entity_id=issue["id"])
    return issue


@router.patch("/{issue_id}", response_model=IssueOut)
async def update_issue(
    body: IssueUpdate,
    issue_id: str = Path(..., description="Issue id"),
    store: MemoryStore = Depends(get_store),
) -> dict:
    """
    Update an issue.

    Args:
        body: Fields to update (at least one)
        issue_id: Issue id

    Returns:
        Updated issue
    """
    updates = body.to_record()
    issue = store.update_issue(issue_id, updates)
    if not issue:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(logger, logging.INFO, "Updated issue", entity_id=issue_id, fields=sorted(updates))
    return issue


@router.delete("/{issue_id}", status_code=204)
async def delete_issue(
    issue_id: str = Path(..., description="Issue id"),
    store: MemoryStore = Depends(get_store),
) -> Response:
    """Delete an issue."""
    if not store.delete_issue(issue_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    log_with_context(logger, logging.INFO, "Deleted issue", entity_id=issue_id)
    return Response(status_code=204)
