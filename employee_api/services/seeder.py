"""Startup Seeder — resets the employee table to the fixed demo rows.

Invariants:
    - Steps run in order: create table, delete all rows, insert seed names, log rows
    - Seed names inserted one by one in SEED_EMPLOYEE_NAMES order
    - A failing step is logged with its name and stops the remaining steps
    - Failures never propagate: startup continues, seed_employees() reports False

Design Decisions:
    - Awaited inside the lifespan before the app serves traffic (ADR: readiness gate,
      no detached background task racing the first requests)
    - Takes a session factory, not a session: each step gets its own unit of work
"""

import logging
from contextlib import AbstractAsyncContextManager
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from employee_api.core.domain_types import SEED_EMPLOYEE_NAMES
from employee_api.core.errors import EmployeeApiError
from employee_api.infrastructure.database import create_schema
from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import SqlEmployeeRepository

logger = logging.getLogger(__name__)

SessionScope = Callable[[], AbstractAsyncContextManager[AsyncSession]]


async def seed_employees(
    engine: AsyncEngine,
    session_scope: SessionScope,
    names: tuple[str, ...] = SEED_EMPLOYEE_NAMES,
) -> bool:
    """Run all seeding steps. Returns True when every step succeeded."""
    step = "create_table"
    try:
        await create_schema(engine)
        logger.info("Employee table ready", extra={"step": step})

        async with session_scope() as db:
            repository = SqlEmployeeRepository(db)

            step = "delete_all"
            await repository.delete_all()
            logger.info("Existing employees removed", extra={"step": step})

            step = "insert"
            for name in names:
                employee = await repository.save(Employee(name=name))
                logger.info(
                    f"Seeded {employee!r}",
                    extra={"step": step, "employee_id": employee.id},
                )

            step = "fetch_all"
            for employee in await repository.find_all():
                logger.info(f"{employee!r}", extra={"step": step})
            count = await repository.count()
            logger.info(
                f"Seeding complete: {count} employees",
                extra={"step": step, "count": count},
            )
        return True
    except EmployeeApiError as e:
        logger.error(
            f"Seeding failed at step {step}: {e.message}",
            extra={"step": step, "error_code": e.code},
        )
    except Exception as e:
        logger.error(
            f"Seeding failed at step {step}: {e}",
            extra={"step": step}, exc_info=True,
        )
    return False
