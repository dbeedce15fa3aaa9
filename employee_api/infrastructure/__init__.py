"""Infrastructure Layer — database session management and observability.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All store failures mapped to DatabaseError before leaving this layer

Design Decisions:
    - Resilient wrappers over raw clients (ADR: single responsibility)
"""
