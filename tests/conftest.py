"""Pytest fixtures for Todo Service tests."""

from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from todo_service.api.main import create_application
from todo_service.config.settings import Settings
from todo_service.shared.db.session import Database


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh SQLite file, server ACTIVE, short delays."""
    return Settings(
        APP_ENV="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}",
        SERVER_ROLE="active",
        DASHBOARD_PROFILE_DELAY_SECONDS=0.05,
        REPORT_PROCESSING_DELAY_SECONDS=0.0,
        STATS_JOB_INTERVAL_SECONDS=3600,
    )


@pytest_asyncio.fixture
async def database(settings: Settings):
    """Initialized Database on the temporary file."""
    db = Database(settings.DATABASE_URL)
    await db.init()
    yield db
    await db.dispose()


class BrokenDatabase:
    """Stand-in whose sessions fail as if the store were unreachable."""

    @asynccontextmanager
    async def session(self):
        raise OperationalError("SELECT 1", {}, Exception("database is unreachable"))
        yield  # pragma: no cover


@pytest.fixture
def broken_database() -> BrokenDatabase:
    return BrokenDatabase()


def _client(settings: Settings):
    app = create_application(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client(settings: Settings):
    """TestClient for an app that starts ACTIVE."""
    yield from _client(settings)


@pytest.fixture
def standby_client(settings: Settings):
    """TestClient for an app that starts in STANDBY (the default role)."""
    yield from _client(settings.model_copy(update={"SERVER_ROLE": "standby"}))
