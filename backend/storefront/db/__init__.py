"""Persistence Layer — declarative base and SQLAlchemy repository implementations.

Invariants:
    - Repositories implement core/repository_protocols.py and nothing else
    - Each write operation commits its own unit of work (single data-store call per operation)
    - Conditional statements (UPDATE/DELETE ... WHERE key = ?) report whether a row matched
"""
