"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment (APP_ENV=test -> in-memory storage)
  - Provide in-memory repositories and entity factories
  - Reset cached singletons between tests

Collaborators:
  - pytest: Test framework
  - masterdata.container: DI singletons
  - masterdata.infrastructure.repositories.in_memory

Notes:
  - Fixtures are auto-discovered by pytest
  - .env files are ignored so a developer's local settings never leak in
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_JSON", "true")

from masterdata.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from masterdata.container import reset_container  # noqa: E402
from masterdata.domain.entities import (  # noqa: E402
    Facility,
    FacilityCategory,
    FacilityStatus,
    User,
    UserRole,
    UserStatus,
)
from masterdata.infrastructure.repositories import (  # noqa: E402
    InMemoryFacilityRepository,
    InMemoryUserRepository,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Needs PostgreSQL (RUN_INTEGRATION=1)"
    )


# ============================================================================
# Singletons
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_singletons():
    """R: Every test starts with empty in-memory tables and fresh settings."""
    app_config.get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    app_config.get_settings.cache_clear()


# ============================================================================
# Repositories
# ============================================================================


class _Clock:
    """Strictly increasing timestamps so created_at ordering is deterministic."""

    def __init__(self, start: datetime):
        self._current = start

    def __call__(self) -> datetime:
        self._current = self._current + timedelta(seconds=1)
        return self._current


@pytest.fixture
def clock() -> _Clock:
    return _Clock(datetime(2024, 4, 1, tzinfo=timezone.utc))


@pytest.fixture
def user_repo(monkeypatch, clock) -> InMemoryUserRepository:
    repo = InMemoryUserRepository()
    monkeypatch.setattr(repo, "_now", clock)
    return repo


@pytest.fixture
def facility_repo(monkeypatch, clock) -> InMemoryFacilityRepository:
    repo = InMemoryFacilityRepository()
    monkeypatch.setattr(repo, "_now", clock)
    return repo


# ============================================================================
# Entity factories
# ============================================================================


@pytest.fixture
def make_user():
    """R: Build a User without storage (for filter/CSV tests)."""

    def _make(**overrides) -> User:
        from uuid import uuid4

        values = dict(
            id=uuid4(),
            email="taro@acme.co.jp",
            name="Taro Yamada",
            role=UserRole.USER,
            status=UserStatus.ACTIVE,
        )
        values.update(overrides)
        return User(**values)

    return _make


@pytest.fixture
def make_facility():
    """R: Build a Facility without storage (for filter/CSV tests)."""

    def _make(**overrides) -> Facility:
        from uuid import uuid4

        values = dict(
            id=uuid4(),
            code="TKY-001",
            name="Tokyo Head Office",
            category=FacilityCategory.HEAD,
            status=FacilityStatus.ACTIVE,
        )
        values.update(overrides)
        return Facility(**values)

    return _make
