"""Product Ordering — pure in-memory sort for catalog listings.

Invariants:
    - Default order is name ascending
    - name compares case-sensitively (code point order); price compares numerically
    - Sort is stable: equal keys keep the order the store returned them in
    - Unsupported field/direction raises FieldValidationError (never silently ignored)
"""

from typing import Sequence, TypeVar

from storefront.core.domain_types import SortDirection, SortField
from storefront.core.errors import FieldValidationError

T = TypeVar("T")


def resolve_sort(
    sort_field: str | SortField | None, sort_direction: str | SortDirection | None,
) -> tuple[SortField, SortDirection]:
    """Normalize raw sort options, applying name/asc defaults."""
    try:
        field = SortField(sort_field) if sort_field else SortField.NAME
    except ValueError:
        raise FieldValidationError(
            f"Unsupported sort field: {sort_field}", "sort",
        )
    try:
        direction = (
            SortDirection(sort_direction) if sort_direction else SortDirection.ASC
        )
    except ValueError:
        raise FieldValidationError(
            f"Unsupported sort direction: {sort_direction}", "order",
        )
    return field, direction


def sort_products(
    products: Sequence[T],
    sort_field: str | SortField | None = None,
    sort_direction: str | SortDirection | None = None,
) -> list[T]:
    """Return a new list of products ordered by the requested field."""
    field, direction = resolve_sort(sort_field, sort_direction)
    return sorted(
        products,
        key=lambda p: getattr(p, field.value),
        reverse=direction is SortDirection.DESC,
    )
