"""Employee Repository — typed accessor over the employee table.

Invariants:
    - save() inserts when id is None (store assigns id), else overwrites that row
    - save() refuses a blank name before touching the store
    - find_all() is ordered by id so listings are stable across calls
    - Every mutation commits immediately (no cross-call transactions)

Design Decisions:
    - merge() for updates: full-row replacement without a prior SELECT in this layer
      (ADR: existence check belongs to the route, which must answer 404)
    - Bulk DELETE statements for delete/delete_all: no per-row ORM round-trips
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.domain_types import EmployeeId
from employee_api.core.errors import EmployeeValidationError, ErrorContext
from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class SqlEmployeeRepository:
    """EmployeeRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_all(self) -> list[Employee]:
        result = await self._db.execute(select(Employee).order_by(Employee.id))
        return list(result.scalars().all())

    async def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        return await self._db.get(Employee, employee_id)

    async def save(self, employee: Employee) -> Employee:
        """Insert or overwrite; returns the persisted row with its id."""
        if not employee.name or not employee.name.strip():
            raise EmployeeValidationError(
                "Employee name cannot be blank", "name",
                ErrorContext(employee_id=employee.id),
            )
        if employee.id is None:
            self._db.add(employee)
            persisted = employee
        else:
            persisted = await self._db.merge(employee)
        await self._db.commit()
        await self._db.refresh(persisted)
        logger.debug(
            f"Saved employee {persisted.id}",
            extra={"employee_id": persisted.id},
        )
        return persisted

    async def delete(self, employee: Employee | EmployeeId) -> None:
        employee_id = employee.id if isinstance(employee, Employee) else employee
        await self._db.execute(delete(Employee).where(Employee.id == employee_id))
        await self._db.commit()
        # Drop any cached copy so a later get() goes back to the store
        self._db.expunge_all()

    async def delete_all(self) -> None:
        await self._db.execute(delete(Employee))
        await self._db.commit()
        self._db.expunge_all()

    async def count(self) -> int:
        result = await self._db.execute(select(func.count()).select_from(Employee))
        return result.scalar_one()
