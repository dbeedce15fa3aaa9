"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so readiness probes hit the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (ADR: PostgreSQL-specific features not exercised here)
    - seeded_employees runs the real seeder against the test engine
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from employee_api.db.base import Base
from employee_api.infrastructure.database import get_db, DatabaseSessionManager
from employee_api.models.employee import Employee
from employee_api.services.seeder import seed_employees
import employee_api.infrastructure.database as db_module
from employee_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Patch db_manager for the readiness probe, which uses it directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
    app.state.seeded = False


@pytest.fixture
async def seeded_employees(test_engine, test_session_factory) -> list[Employee]:
    """Run the startup seeder against the test DB; returns the seeded rows."""
    assert await seed_employees(test_engine, test_session_factory)
    async with test_session_factory() as session:
        result = await session.execute(select(Employee).order_by(Employee.id))
        return list(result.scalars().all())


@pytest.fixture
async def saved_employee(test_db) -> Employee:
    """Insert a single employee directly into the test DB."""
    employee = Employee(name="Ada")
    test_db.add(employee)
    await test_db.commit()
    await test_db.refresh(employee)
    return employee
