"""Product Repository — SQLAlchemy implementation of ProductRepository.

Invariants:
    - update/increment_quantity/delete are single conditional statements; they return
      None/False when the product vanished after the service's existence check
    - Quantity increments are computed by the store (quantity = quantity + delta)
    - delete removes the product's reviews and favorite rows in the same transaction
    - Results reloaded after a write reflect the committed row (populate_existing)
    - Store failures during search surface as DatabaseError (driver message in .detail)
"""

import logging
from typing import Any, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import ProductId
from storefront.core.errors import DatabaseError
from storefront.core.product_search import ProductFilter
from storefront.models.favorite import Favorite
from storefront.models.product import Product
from storefront.models.review import Review

logger = logging.getLogger(__name__)


class SqlProductRepository:
    """Product persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[Product]:
        result = await self.db.execute(select(Product))
        return list(result.scalars().all())

    async def find_page(self, offset: int, limit: int) -> list[Product]:
        result = await self.db.execute(
            select(Product).order_by(Product.id).offset(offset).limit(limit),
        )
        return list(result.scalars().all())

    async def find_by_id(self, product_id: ProductId) -> Product | None:
        return await self.db.get(Product, product_id)

    async def find_by_ids(self, product_ids: Sequence[ProductId]) -> list[Product]:
        """Bulk lookup; keeps the caller's id order and skips missing ids."""
        if not product_ids:
            return []
        result = await self.db.execute(
            select(Product).where(Product.id.in_(product_ids)),
        )
        by_id = {p.id: p for p in result.scalars().all()}
        return [by_id[pid] for pid in product_ids if pid in by_id]

    async def insert(self, data: dict[str, Any]) -> Product:
        product = Product(**data, reviews=[])
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def update(
        self, product_id: ProductId, values: dict[str, Any],
    ) -> Product | None:
        if not values:
            return await self.find_by_id(product_id)
        result = await self.db.execute(
            update(Product).where(Product.id == product_id).values(**values),
        )
        return await self._commit_and_reload(product_id, result.rowcount)

    async def increment_quantity(
        self, product_id: ProductId, delta: int,
    ) -> Product | None:
        result = await self.db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(quantity=Product.quantity + delta),
        )
        return await self._commit_and_reload(product_id, result.rowcount)

    async def delete(self, product_id: ProductId) -> bool:
        await self.db.execute(delete(Review).where(Review.product_id == product_id))
        await self.db.execute(
            delete(Favorite).where(Favorite.product_id == product_id),
        )
        result = await self.db.execute(
            delete(Product).where(Product.id == product_id),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            return False
        await self.db.commit()
        return True

    async def search(self, criteria: ProductFilter) -> list[Product]:
        query = select(Product)
        if criteria.name is not None:
            query = query.where(
                Product.name.icontains(criteria.name, autoescape=True),
            )
        if criteria.category is not None:
            query = query.where(Product.category == criteria.category)
        if criteria.min_price is not None:
            query = query.where(Product.price >= criteria.min_price)
        if criteria.max_price is not None:
            query = query.where(Product.price <= criteria.max_price)
        try:
            result = await self.db.execute(query.order_by(Product.id))
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(str(e), "search") from e
        return list(result.scalars().all())

    async def add_review(
        self, product_id: ProductId, data: dict[str, Any],
    ) -> Review:
        review = Review(product_id=product_id, **data)
        self.db.add(review)
        await self.db.commit()
        return review

    async def list_reviews(self, product_id: ProductId) -> list[Review]:
        result = await self.db.execute(
            select(Review)
            .where(Review.product_id == product_id)
            .order_by(Review.id),
        )
        return list(result.scalars().all())

    async def _commit_and_reload(
        self, product_id: ProductId, rowcount: int,
    ) -> Product | None:
        if rowcount == 0:
            await self.db.rollback()
            logger.warning(
                f"Conditional write matched no product {product_id}",
                extra={"product_id": product_id},
            )
            return None
        await self.db.commit()
        result = await self.db.execute(
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()
