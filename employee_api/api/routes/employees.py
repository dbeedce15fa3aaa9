"""Employee Routes — the five CRUD handlers and their static dispatch table.

Invariants:
    - Path ids and request bodies are validated by FastAPI/Pydantic before a handler
      runs; invalid input never reaches the repository (400 via error_handlers)
    - Missing employees answer 404 with an empty body, never an error envelope
    - Ids above MAX_EMPLOYEE_ID answer the same empty 404 without a store call
    - Location header and route prefix share EMPLOYEES_PATH
    - Handlers only talk to the EmployeeRepository contract

Design Decisions:
    - EMPLOYEE_ROUTES is a plain table registered with add_api_route: routing is data,
      not decorator side effects (ADR: explicit registration, no auto-discovery)
    - update replaces every mutable field: the stored row is rebuilt from the request
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.domain_types import MAX_EMPLOYEE_ID, EmployeeId
from employee_api.core.repository_protocols import EmployeeRepository
from employee_api.infrastructure.database import get_db
from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import SqlEmployeeRepository
from employee_api.schemas.employee import EmployeeRequest, EmployeeResponse

logger = logging.getLogger(__name__)

EMPLOYEES_PATH = "/employees"

EmployeeIdPath = Annotated[
    int, Path(gt=0, description="Store-assigned employee id"),
]


def get_employee_repository(
    db: AsyncSession = Depends(get_db),
) -> EmployeeRepository:
    """FastAPI dependency — one repository per request session."""
    return SqlEmployeeRepository(db)


def is_issuable_id(employee_id: int) -> bool:
    """Ids beyond the SERIAL range were never issued; the store would reject them."""
    return employee_id <= MAX_EMPLOYEE_ID


def employee_location(employee_id: int) -> str:
    return f"{EMPLOYEES_PATH}/{employee_id}"


async def list_employees(
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    """List all employees."""
    employees = await repository.find_all()
    return [EmployeeResponse.model_validate(e) for e in employees]


async def get_employee(
    employee_id: EmployeeIdPath,
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    """Get one employee, or an empty 404."""
    if not is_issuable_id(employee_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    employee = await repository.find_by_id(EmployeeId(employee_id))
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return EmployeeResponse.model_validate(employee)


async def create_employee(
    body: EmployeeRequest,
    response: Response,
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    """Create an employee; the store assigns the id."""
    employee = await repository.save(Employee(name=body.name))
    response.headers["Location"] = employee_location(employee.id)
    logger.info(
        f"Created employee {employee.id}", extra={"employee_id": employee.id},
    )
    return EmployeeResponse.model_validate(employee)


async def update_employee(
    body: EmployeeRequest,
    employee_id: EmployeeIdPath,
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    """Replace an existing employee's fields, or an empty 404."""
    if not is_issuable_id(employee_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    existing = await repository.find_by_id(EmployeeId(employee_id))
    if existing is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    employee = await repository.save(Employee(id=existing.id, name=body.name))
    logger.info(
        f"Updated employee {employee.id}", extra={"employee_id": employee.id},
    )
    return EmployeeResponse.model_validate(employee)


async def delete_employee(
    employee_id: EmployeeIdPath,
    repository: EmployeeRepository = Depends(get_employee_repository),
):
    """Delete an employee (204), or an empty 404."""
    if not is_issuable_id(employee_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    existing = await repository.find_by_id(EmployeeId(employee_id))
    if existing is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    await repository.delete(EmployeeId(existing.id))
    logger.info(
        f"Deleted employee {employee_id}", extra={"employee_id": employee_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# (method, path, handler, route options)
EMPLOYEE_ROUTES = (
    ("GET", "", list_employees, {"response_model": list[EmployeeResponse]}),
    ("GET", "/{employee_id}", get_employee, {"response_model": EmployeeResponse}),
    ("POST", "", create_employee, {
        "response_model": EmployeeResponse,
        "status_code": status.HTTP_201_CREATED,
    }),
    ("PUT", "/{employee_id}", update_employee, {"response_model": EmployeeResponse}),
    ("DELETE", "/{employee_id}", delete_employee, {
        "status_code": status.HTTP_204_NO_CONTENT,
        "response_class": Response,
    }),
)


def build_router() -> APIRouter:
    """Register EMPLOYEE_ROUTES on a fresh router."""
    router = APIRouter(prefix=EMPLOYEES_PATH, tags=["employees"])
    for method, path, endpoint, options in EMPLOYEE_ROUTES:
        router.add_api_route(
            path, endpoint, methods=[method], name=endpoint.__name__, **options,
        )
    return router


router = build_router()
