# tests/conftest.py
"""
Shared fixtures and test settings.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

# Environment must be set before src modules are imported
os.environ.setdefault("GOOGLE_MAPS_API_KEY", "test_api_key")
os.environ.setdefault("DB_PASSWORD", "test_password")


ORDER_ID = "5b2a8f7e-1d3c-4e9a-9f0b-2c6d8e4a1b3f"


# =============================================================================
# CONFIGURATION FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Configuration used by loader tests."""
    return {
        "_comment_system": "ignored",
        "PROJECT_NAME": "order_service_test",
        "VERSION": "1.0.0-test",
        "DEBUG": True,
        "ENVIRONMENT": "test",
        "ORDER_SERVICE_HOST": "127.0.0.1",
        "ORDER_SERVICE_PORT": 9090,
        "LOG_LEVEL": "INFO",
        "LOG_TO_FILE": False,
        "LOG_FILE_PATH": "logs/test.log",
        "LOG_FORMAT": "json",
        "GOOGLE_MAPS_BASE_URL": "http://maps.test/",
        "GOOGLE_MAPS_TIMEOUT": 2.5,
        "DB_HOST": "db.test",
        "DB_PORT": 5433,
        "DB_NAME": "orders_test",
        "DB_USER": "tester",
        "DB_MIN_POOL_SIZE": 1,
        "DB_MAX_POOL_SIZE": 3,
        "DB_COMMAND_TIMEOUT": 5,
        "PAGE_SIZE": 25,
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, mock_config: dict[str, Any]) -> Path:
    """Writes mock_config to a temporary config.json."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(mock_config, indent=2))
    return config_file


# =============================================================================
# INFRASTRUCTURE MOCKS
# =============================================================================

@pytest.fixture
def mock_db() -> AsyncMock:
    """Database manager mock."""
    db = AsyncMock()
    db.fetchrow = AsyncMock(return_value=None)
    db.fetch = AsyncMock(return_value=[])
    db.execute = AsyncMock(return_value="UPDATE 1")
    db.fetchval = AsyncMock(return_value=None)
    return db


@pytest.fixture
def mock_repo() -> AsyncMock:
    """Order repository mock."""
    repo = AsyncMock()
    repo.get_by_id = AsyncMock()
    repo.get_page = AsyncMock(return_value=[])
    repo.create = AsyncMock()
    repo.update_by_id = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def mock_geo() -> AsyncMock:
    """Distance lookup mock."""
    geo = AsyncMock()
    geo.compute_distance = AsyncMock(return_value=30539)
    return geo


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def order_id() -> str:
    return ORDER_ID


@pytest.fixture
def sample_order_row() -> dict[str, Any]:
    """Order row as returned by the database."""
    from uuid import UUID

    return {
        "id": UUID(ORDER_ID),
        "distance": 30539,
        "status": "UNASSIGNED",
    }
