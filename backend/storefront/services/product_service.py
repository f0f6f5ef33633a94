"""Product Service — business rules for the product catalog.

Invariants:
    - Every operation addressing a product by id calls get_product first (NotFound on miss)
    - The following mutation is conditional; if it matches no row the product was
      removed concurrently and NotFound is raised
    - Listing order is computed in memory over the full result set (name asc by default)
    - Favorites are scoped to an owner username; no process-wide state
    - Store failures during search surface as SearchFailedError with the original message

Design Decisions:
    - replace_product (PUT) overwrites all editable fields; edit_product (PATCH) merges
    - Service speaks repository protocols only; no SQLAlchemy imports here
"""

import logging
from typing import Any, Sequence

from storefront.core.domain_types import (
    DEFAULT_PAGE_SIZE, ProductId, SortDirection, SortField, Username,
)
from storefront.core.errors import (
    DatabaseError, ResourceNotFoundError, SearchFailedError,
)
from storefront.core.product_ordering import sort_products
from storefront.core.product_search import ProductFilter
from storefront.core.repository_protocols import (
    FavoriteRepository, ProductLike, ProductRepository, ReviewLike,
    UserLike, UserRepository,
)

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "description", "image", "price", "quantity", "category")


class ProductService:
    """Catalog lifecycle, search, stock, favorites and reviews."""

    def __init__(
        self,
        products: ProductRepository,
        favorites: FavoriteRepository,
        users: UserRepository,
    ):
        self.products = products
        self.favorites = favorites
        self.users = users

    # ─── Queries ────────────────────────────────────────────────

    async def list_products(
        self,
        sort_field: str | SortField | None = None,
        sort_direction: str | SortDirection | None = None,
    ) -> list[ProductLike]:
        products = await self.products.find_all()
        return sort_products(products, sort_field, sort_direction)

    async def list_products_page(
        self, page_number: int, page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Sequence[ProductLike]:
        return await self.products.find_page(
            offset=(page_number - 1) * page_size, limit=page_size,
        )

    async def get_product(self, product_id: ProductId) -> ProductLike:
        product = await self.products.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError("Product", str(product_id))
        return product

    async def search_products(self, criteria: ProductFilter) -> Sequence[ProductLike]:
        try:
            return await self.products.search(criteria)
        except DatabaseError as e:
            raise SearchFailedError(e.detail) from e

    # ─── Mutations ──────────────────────────────────────────────

    async def create_product(self, data: dict[str, Any]) -> ProductLike:
        product = await self.products.insert(data)
        logger.info(
            f"Product {product.id} created", extra={"product_id": product.id},
        )
        return product

    async def delete_product(self, product_id: ProductId) -> None:
        await self.get_product(product_id)
        if not await self.products.delete(product_id):
            raise ResourceNotFoundError("Product", str(product_id))
        logger.info(
            f"Product {product_id} deleted", extra={"product_id": product_id},
        )

    async def replace_product(
        self, product_id: ProductId, data: dict[str, Any],
    ) -> ProductLike:
        """Overwrite every editable field; omitted fields are reset to None."""
        await self.get_product(product_id)
        values = {key: data.get(key) for key in EDITABLE_FIELDS}
        return await self._apply_update(product_id, values)

    async def edit_product(
        self, product_id: ProductId, data: dict[str, Any],
    ) -> ProductLike:
        """Merge only the supplied fields into the stored product."""
        await self.get_product(product_id)
        values = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
        return await self._apply_update(product_id, values)

    async def update_stock(self, product_id: ProductId, delta: int) -> ProductLike:
        """Add delta (may be negative) to the stock. Not clamped at zero."""
        await self.get_product(product_id)
        product = await self.products.increment_quantity(product_id, delta)
        if product is None:
            raise ResourceNotFoundError("Product", str(product_id))
        logger.info(
            f"Stock of product {product_id} adjusted by {delta} to {product.quantity}",
            extra={"product_id": product_id},
        )
        return product

    async def _apply_update(
        self, product_id: ProductId, values: dict[str, Any],
    ) -> ProductLike:
        product = await self.products.update(product_id, values)
        if product is None:
            raise ResourceNotFoundError("Product", str(product_id))
        logger.info(
            f"Product {product_id} updated ({', '.join(sorted(values)) or 'no fields'})",
            extra={"product_id": product_id},
        )
        return product

    # ─── Reviews ────────────────────────────────────────────────

    async def add_review(
        self, product_id: ProductId, review: dict[str, Any],
    ) -> ReviewLike:
        await self.get_product(product_id)
        return await self.products.add_review(product_id, review)

    async def list_reviews(self, product_id: ProductId) -> list[ReviewLike]:
        await self.get_product(product_id)
        return list(await self.products.list_reviews(product_id))

    # ─── Favorites ──────────────────────────────────────────────

    async def add_favorite(self, username: Username, product_id: ProductId) -> None:
        owner = await self._get_owner(username)
        await self.get_product(product_id)
        await self.favorites.add(owner.id, product_id)

    async def remove_favorite(self, username: Username, product_id: ProductId) -> None:
        owner = await self._get_owner(username)
        await self.favorites.remove(owner.id, product_id)

    async def list_favorites(self, username: Username) -> Sequence[ProductLike]:
        owner = await self._get_owner(username)
        product_ids = await self.favorites.list_product_ids(owner.id)
        return await self.products.find_by_ids(product_ids)

    async def _get_owner(self, username: Username) -> UserLike:
        user = await self.users.find_by_username(username)
        if user is None:
            raise ResourceNotFoundError(
                "User", username, f"User {username} not found",
            )
        return user
