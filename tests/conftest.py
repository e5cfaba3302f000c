"""Shared fixtures for the todo service tests."""

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from coverme.main import create_app  # noqa: E402
from coverme.repositories.todo_repository import FailingTodoRepository, InMemoryTodoRepository  # noqa: E402
from coverme.settings import get_settings  # noqa: E402


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "network: test talks to a public third-party API")


def pytest_collection_modifyitems(config, items) -> None:
    if os.getenv("RUN_NETWORK_TESTS") == "1":
        return
    skip_network = pytest.mark.skip(reason="set RUN_NETWORK_TESTS=1 to run")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start each test from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def repository() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


@pytest.fixture
def client(repository: InMemoryTodoRepository) -> TestClient:
    """Provide a TestClient over a fresh in-memory repository."""
    return TestClient(create_app(repository))


@pytest.fixture
def broken_client() -> TestClient:
    """Provide a TestClient whose repository fails every operation."""
    return TestClient(create_app(FailingTodoRepository()))
