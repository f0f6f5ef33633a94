"""Services Layer — Product Service and User Service.

Invariants:
    - Services depend on core/repository_protocols.py, never on ORM models
    - Each by-key mutation verifies existence first, then mutates conditionally
"""
