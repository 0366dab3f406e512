import pytest
from fastapi.testclient import TestClient

from textforge.core.config import Settings, get_settings
from textforge.main import app



@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def small_limits_client():
    """Client whose settings cap inputs at 10 characters and pipelines at 2 steps."""
    app.dependency_overrides[get_settings] = lambda: Settings(
        max_input_length=10,
        max_pipeline_steps=2,
        kdf_iterations=1000,
    )
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
