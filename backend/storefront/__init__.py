"""Storefront Application Package — product catalog and user accounts API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
