"""Fixtures for the Clarify test suite.

Provides an in-memory SQLite database, repositories and services bound to
it, and an HTTP client wired to the FastAPI app without a real network.
"""

import httpx
import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from clarify.api.dependencies import get_suggestion_generator
from clarify.core.database import Base, _enable_sqlite_foreign_keys, get_db_session
from clarify.core.repositories import (
    CriterionRepository,
    DecisionRepository,
    EvaluationRepository,
    OptionRepository,
)
from clarify.core.services import DecisionService, SuggestionService
from clarify.main import create_app
from clarify.utils.config import LoggingSettings, SecuritySettings, Settings

import clarify.core.models  # noqa: F401  (register tables on the metadata)


# --- Database ---


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


# --- Services ---


@pytest.fixture
def decision_service(session):
    return DecisionService(
        DecisionRepository(session),
        OptionRepository(session),
        CriterionRepository(session),
        EvaluationRepository(session),
    )


@pytest.fixture
def suggestion_service(session, decision_service):
    return SuggestionService(
        decision_service,
        OptionRepository(session),
        CriterionRepository(session),
        EvaluationRepository(session),
    )


# --- HTTP ---


@pytest.fixture
def test_settings():
    return Settings(
        environment="test",
        security=SecuritySettings(api_key="", rate_limit_per_minute=1000),
        logging=LoggingSettings(level="WARNING", json_output=False),
    )


@pytest.fixture
def app(test_settings, session_factory):
    app = create_app(test_settings)

    async def _session_override():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _session_override
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """httpx client talking to the app in-process."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def override_generator(app):
    """Install a stand-in suggestion generator on the app."""

    def _install(generator):
        app.dependency_overrides[get_suggestion_generator] = lambda: generator

    return _install


# --- Sample Data ---


@pytest.fixture
def sample_decision_data():
    return {
        "title": "Which laptop to buy",
        "description": "Replacing a 6 year old machine",
        "tags": ["hardware", "personal"],
    }
