"""Product Search Filter — value object for catalog search criteria.

Invariants:
    - Every criterion is optional; an empty filter matches every product
    - Empty strings are treated as omitted (same as None)
    - Price bounds are inclusive; an omitted bound is open
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductFilter:
    """Conjunction of search criteria."""
    name: str | None = None
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    @classmethod
    def build(
        cls,
        name: str | None = None,
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
    ) -> "ProductFilter":
        return cls(
            name=name or None,
            category=category or None,
            min_price=min_price,
            max_price=max_price,
        )
