"""Boundary Protocols — contracts between routes and persistence.

Invariants:
    - Routes and the seeder depend on EmployeeRepository, never on a concrete class
    - save() assigns an id when employee.id is None, otherwise overwrites that row
    - find_by_id() returns None for a missing row; absence is not an exception

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: every implementation talks to the store
"""

from typing import Protocol, TYPE_CHECKING

from employee_api.core.domain_types import EmployeeId

if TYPE_CHECKING:
    from employee_api.models.employee import Employee


class EmployeeRepository(Protocol):
    """Contract for employee persistence — implemented by repositories/."""
    async def find_all(self) -> list["Employee"]: ...
    async def find_by_id(self, employee_id: EmployeeId) -> "Employee | None": ...
    async def save(self, employee: "Employee") -> "Employee": ...
    async def delete(self, employee: "Employee | EmployeeId") -> None: ...
    async def delete_all(self) -> None: ...
    async def count(self) -> int: ...
