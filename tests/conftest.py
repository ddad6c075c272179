"""Pytest configuration and fixtures."""

import os

# Must be set before rollout modules are imported by test collection
os.environ.setdefault("ROLLOUT_ENV", "test")
os.environ.setdefault("SEED_DATA", "false")

import pytest
from fastapi.testclient import TestClient

from rollout.core.config import Settings
from rollout.db.memory_store import MemoryStore
from rollout.main import create_app

BRAIN_URL = "http://brain.test:9000"


@pytest.fixture
def settings() -> Settings:
    return Settings(ROLLOUT_ENV="test", BRAIN_URL=BRAIN_URL, SEED_DATA=False)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def client(store, settings):
    """TestClient over an app with its own empty store."""
    return TestClient(create_app(store=store, settings=settings))
