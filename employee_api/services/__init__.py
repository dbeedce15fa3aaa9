"""Services — orchestration that sits outside the request path.

Invariants:
    - Services depend on repositories and infrastructure, never on api/
"""
