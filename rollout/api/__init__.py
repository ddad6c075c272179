"""API router for /api endpoints."""

from fastapi import APIRouter

from rollout.api import brain, deliverables, franchise_groups, initiatives, issues, stats

router = APIRouter()

# Dashboard statistics
router.include_router(stats.router, tags=["stats"])

# Entity collections
router.include_router(initiatives.router, tags=["initiatives"])
router.include_router(franchise_groups.router, tags=["franchise_groups"])
router.include_router(deliverables.router, tags=["deliverables"])
router.include_router(issues.router, tags=["issues"])

# Advisor proxy
router.include_router(brain.router, tags=["brain"])
