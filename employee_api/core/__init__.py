"""Core Layer — domain types, error hierarchy, and persistence contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/ at runtime
    - Nothing in core/ performs IO

Design Decisions:
    - Contracts live beside the domain types so routes depend inward only
"""
