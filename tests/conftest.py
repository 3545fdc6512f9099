"""
Pytest configuration and fixtures.
"""

import os

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

# Set test environment before the app reads its settings
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_FORMAT"] = "console"
os.environ.pop("DEFAULT_MODEL", None)
os.environ.pop("MAX_PROMPT_LENGTH", None)

from promptkit.application.services.prompt_pipeline import PromptPipelineService  # noqa: E402


@pytest.fixture
def coding_prompt():
    return "Please write a function that will handle user authentication"


@pytest.fixture
def compound_prompt():
    return "Create user model, setup authentication, implement CRUD operations"


@pytest.fixture
def complex_prompt():
    return (
        "Build a complete end-to-end production enterprise platform with "
        "security, performance testing and deployment monitoring"
    )


@pytest.fixture
def pipeline_service():
    return PromptPipelineService(max_prompt_length=5000)


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def app():
    """FastAPI application instance for testing."""
    from promptkit.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app):
    """Async FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as ac:
        yield ac
