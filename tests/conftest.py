"""
Test configuration and fixtures for the Agenda API test suite.
Provides an in-memory database, an HTTP client bound to it and sample payloads.
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.db.models import Contato

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_sessionmaker() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh in-memory database per test, schema created from the models."""
    # One shared connection so every session sees the same in-memory database
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_sessionmaker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with test_sessionmaker() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_sessionmaker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose requests each get their own session on the test database."""

    async def override_get_db():
        async with test_sessionmaker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_contato_data():
    """Sample contact payload."""
    return {
        "nome": "Ana",
        "telefone": "111",
        "ativo": True
    }


class TestDataFactory:
    """Factory class for creating test data."""

    @staticmethod
    async def create_contato(
        session: AsyncSession,
        nome: str | None = "Test Contact",
        telefone: str | None = "000",
        ativo: bool = True,
    ) -> Contato:
        """Create and commit a test contact."""
        contato = Contato(nome=nome, telefone=telefone, ativo=ativo)
        session.add(contato)
        await session.commit()
        return contato


@pytest.fixture
def test_factory():
    """Provide access to test data factory."""
    return TestDataFactory
