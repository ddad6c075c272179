"""Dashboard statistics endpoint."""

from fastapi import APIRouter, Depends

from rollout.api.deps import get_store
from rollout.core.schemas_dashboard import DashboardStats
from rollout.db.memory_store import MemoryStore

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_stats(store: MemoryStore = Depends(get_store)) -> dict:
    """Counts recomputed from the collections on every call."""
    return store.get_stats()
