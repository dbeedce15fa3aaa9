"""Startup Seeder — verifies table reset and the fixed demo rows.

Invariants:
    - After seeding, exactly wojtek, admin, test exist, inserted in that order
    - Seeding is repeatable: previous rows are removed, never duplicated
    - Seeding creates the table when it is missing
    - Failures are reported as False, never raised
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from employee_api.core.errors import DatabaseError
from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import SqlEmployeeRepository
from employee_api.services.seeder import seed_employees
import employee_api.services.seeder as seeder_module


async def _names(session_factory) -> list[str]:
    async with session_factory() as session:
        employees = await SqlEmployeeRepository(session).find_all()
        return [e.name for e in employees]


async def test_seed_inserts_fixed_names_in_order(test_engine, test_session_factory):
    assert await seed_employees(test_engine, test_session_factory) is True
    assert await _names(test_session_factory) == ["wojtek", "admin", "test"]


async def test_seed_replaces_existing_rows(test_engine, test_session_factory, test_db):
    test_db.add_all([Employee(name="old-1"), Employee(name="old-2")])
    await test_db.commit()

    await seed_employees(test_engine, test_session_factory)

    assert await _names(test_session_factory) == ["wojtek", "admin", "test"]


async def test_seed_twice_does_not_duplicate(test_engine, test_session_factory):
    await seed_employees(test_engine, test_session_factory)
    await seed_employees(test_engine, test_session_factory)

    assert await _names(test_session_factory) == ["wojtek", "admin", "test"]


async def test_seed_creates_missing_table():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        assert await seed_employees(engine, factory) is True
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT name FROM employee ORDER BY id"))
            assert [row[0] for row in result] == ["wojtek", "admin", "test"]
    finally:
        await engine.dispose()


async def test_seed_accepts_custom_names(test_engine, test_session_factory):
    await seed_employees(test_engine, test_session_factory, names=("solo",))
    assert await _names(test_session_factory) == ["solo"]


async def test_seed_failure_returns_false_and_logs_step(
    test_engine, test_session_factory, monkeypatch, caplog,
):
    async def failing_create_schema(engine):
        raise DatabaseError("Schema creation failed", "create_table")

    monkeypatch.setattr(seeder_module, "create_schema", failing_create_schema)

    with caplog.at_level(logging.ERROR, logger="employee_api.services.seeder"):
        result = await seed_employees(test_engine, test_session_factory)

    assert result is False
    assert "create_table" in caplog.text


async def test_seed_unexpected_error_returns_false(
    test_engine, test_session_factory, monkeypatch,
):
    async def broken_delete_all(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(SqlEmployeeRepository, "delete_all", broken_delete_all)

    assert await seed_employees(test_engine, test_session_factory) is False


async def test_seed_logs_final_row_count(test_engine, test_session_factory, caplog):
    with caplog.at_level(logging.INFO, logger="employee_api.services.seeder"):
        await seed_employees(test_engine, test_session_factory)

    assert "Seeding complete: 3 employees" in caplog.text
