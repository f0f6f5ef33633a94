"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps the store-assigned integer key; Username is the user business key
    - All valid sort options encoded as Enums — no raw string matching in services

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: FastAPI validates query parameters against them natively
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)
Username = NewType("Username", str)


# ─── Enums ───────────────────────────────────────────────────────

class SortField(str, Enum):
    """Product fields the catalog listing can be ordered by."""
    NAME = "name"
    PRICE = "price"


class SortDirection(str, Enum):
    """Listing order direction."""
    ASC = "asc"
    DESC = "desc"


class Role(str, Enum):
    """Default role string. Roles are stored as free-form text and never enforced."""
    USER = "user"


DEFAULT_PAGE_SIZE = 10
