"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import os
import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wkstatus.config import get_settings  # noqa: E402

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Drop VAR_* variables and any .env file so each test configures its own settings."""
    for key in list(os.environ):
        if key.upper().startswith("VAR_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger.remove()


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def now():
    """Fixed reference time."""
    return NOW


def iso(moment: datetime) -> str:
    """Format a timestamp the way the WaniKani API does."""
    return moment.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def assignment_resource(subject_id: int, srs_stage: int) -> dict:
    return {
        "id": subject_id * 10,
        "object": "assignment",
        "data": {
            "subject_id": subject_id,
            "subject_type": "kanji",
            "srs_stage": srs_stage,
        },
    }


def assignment_page(records: list[dict], next_url: str | None = None) -> dict:
    return {
        "object": "collection",
        "pages": {"per_page": 500, "next_url": next_url, "previous_url": None},
        "total_count": len(records),
        "data": records,
    }


@pytest.fixture
def user_payload():
    """Sample /user response."""
    return {
        "object": "user",
        "data": {
            "id": "5a6a5234-a392-4a87-8f3f-33342afe8a42",
            "username": "crabigator",
            "level": 12,
            "subscription": {
                "active": True,
                "type": "recurring",
                "max_level_granted": 60,
                "period_ends_at": "2024-12-01T00:00:00.000000Z",
            },
        },
    }


@pytest.fixture
def summary_payload(now):
    """Sample /summary response: 3 reviews due, 1 upcoming, 4 lessons."""
    return {
        "object": "report",
        "data": {
            "lessons": [
                {"available_at": iso(now), "subject_ids": [101, 102, 103, 104]},
            ],
            "next_reviews_at": iso(now + timedelta(hours=1)),
            "reviews": [
                {"available_at": iso(now - timedelta(hours=2)), "subject_ids": [1]},
                {"available_at": iso(now - timedelta(hours=1)), "subject_ids": [2, 3]},
                {"available_at": iso(now + timedelta(hours=1)), "subject_ids": [4]},
            ],
        },
    }
