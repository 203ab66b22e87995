"""Global pytest fixtures and configuration."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from chemapi_core.config import get_core_settings  # noqa: E402
from chemapi_server.app import create_app  # noqa: E402
from chemapi_server.config import get_server_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Ensure settings caches are cleared between tests."""
    get_core_settings.cache_clear()
    get_server_settings.cache_clear()
    yield
    get_core_settings.cache_clear()
    get_server_settings.cache_clear()


@pytest.fixture()
def client():
    """Provide a FastAPI test client with the lifespan running."""
    app = create_app()
    with TestClient(app) as http_client:
        yield http_client
