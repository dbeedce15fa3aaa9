"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all runs
"""

from employee_api.models.employee import Employee  # noqa: F401
