"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps the store-assigned integer key — never reassigned after insert
    - Valid ids lie in 1..MAX_EMPLOYEE_ID (the int4 range of SERIAL)
    - EMPLOYEE_NAME_MAX_LENGTH mirrors the VARCHAR(100) column
    - SEED_EMPLOYEE_NAMES order is the insertion order used by the seeder

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)


# ─── Constants ───────────────────────────────────────────────────

EMPLOYEE_NAME_MAX_LENGTH = 100

SEED_EMPLOYEE_NAMES: tuple[str, ...] = ("wojtek", "admin", "test")

# Largest value a SERIAL (int4) column can hold; higher ids can never exist
MAX_EMPLOYEE_ID = 2**31 - 1
