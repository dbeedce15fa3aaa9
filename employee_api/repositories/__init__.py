"""Repositories — SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - One repository per aggregate; each wraps a single AsyncSession
    - Each mutating call commits its own unit of work
"""
