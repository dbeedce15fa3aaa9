"""Employee ORM — the single persisted entity.

Invariants:
    - Table is `employee(id SERIAL PRIMARY KEY, name VARCHAR(100) NOT NULL)`
    - id is assigned by the store on insert and never reassigned
    - name is non-nullable

Design Decisions:
    - Integer primary key with autoincrement: renders as SERIAL on PostgreSQL
      and as a rowid alias on SQLite (test suite)
    - id typed Mapped[int], not Optional: a nullable primary key breaks multi-row
      INSERT batching; transient rows still carry id=None until flushed
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.core.domain_types import EMPLOYEE_NAME_MAX_LENGTH
from employee_api.db.base import Base


class Employee(Base):
    __tablename__ = "employee"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(EMPLOYEE_NAME_MAX_LENGTH), nullable=False,
    )

    def __repr__(self) -> str:
        return f"Employee(id={self.id}, name={self.name!r})"
