"""FastAPI dependencies resolving the per-app store and advisor client."""

from fastapi import Request

from rollout.core.config import Settings
from rollout.db.memory_store import MemoryStore
from rollout.services.brain_client import BrainClient


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_store(request: Request) -> MemoryStore:
    """Store instance the application was created with."""
    return request.app.state.store


def get_brain_client(request: Request) -> BrainClient:
    """Advisor client the application was created with."""
    return request.app.state.brain_client
