"""API Layer — FastAPI routes, service wiring and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate HTTP to service calls; business rules live in services/
"""
