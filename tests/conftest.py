import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "30")

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from movie_catalog.app import app  # noqa: E402
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository  # noqa: E402
from movie_catalog.domain.ports.repositories.user_repository import UserRepository  # noqa: E402
from movie_catalog.domain.ports.repositories.vote_repository import VoteRepository  # noqa: E402
from movie_catalog.domain.ports.services.auth_service import AuthService  # noqa: E402
from movie_catalog.domain.services.schema_validator import SchemaValidator  # noqa: E402
from movie_catalog.infrastructure.config.dependencies import get_catalog_settings  # noqa: E402
from movie_catalog.infrastructure.config.settings import CatalogSettings, Settings  # noqa: E402
from movie_catalog.infrastructure.persistence.database import get_session  # noqa: E402
from movie_catalog.infrastructure.persistence.models import table_registry  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"


class BaseIntegrationTest:
    """Base class for integration tests running against an in-memory SQLite catalog"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create test database engine"""
        engine = create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest.fixture
    def catalog_settings(self):
        return CatalogSettings(allow_zero_votes=False, one_vote_per_user=False, create_tables=False)

    @pytest_asyncio.fixture
    async def client(self, test_session, catalog_settings):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session
        app.dependency_overrides[get_catalog_settings] = lambda: catalog_settings

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()


@pytest.fixture
def test_settings():
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        SECRET_KEY="test-secret-key-for-testing",
        ALGORITHM="HS256",
        ACCESS_TOKEN_EXPIRE_MINUTES=30,
    )


# Shared fixtures for use case testing
@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for use case testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_vote_repository():
    """Mock vote repository for use case testing"""
    return AsyncMock(spec=VoteRepository)


@pytest.fixture
def mock_user_repository():
    """Mock user repository for use case testing"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_auth_service():
    """Mock auth service for use case testing"""
    return MagicMock(spec=AuthService)


@pytest.fixture
def validator():
    return SchemaValidator()
