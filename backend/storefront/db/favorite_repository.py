"""Favorite Repository — SQLAlchemy implementation of FavoriteRepository.

Invariants:
    - add is idempotent: an existing (user, product) pair is left untouched
    - remove of an absent pair is a no-op
    - list_product_ids returns ids in the order they were favorited
"""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import ProductId
from storefront.models.favorite import Favorite


class SqlFavoriteRepository:
    """Favorite persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, user_id: int, product_id: ProductId) -> None:
        if await self.db.get(Favorite, (user_id, product_id)):
            return
        self.db.add(Favorite(user_id=user_id, product_id=product_id))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # A concurrent add of the same pair is still a successful add.
            if not await self.db.get(Favorite, (user_id, product_id)):
                raise

    async def remove(self, user_id: int, product_id: ProductId) -> None:
        await self.db.execute(
            delete(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.product_id == product_id,
            ),
        )
        await self.db.commit()

    async def list_product_ids(self, user_id: int) -> list[ProductId]:
        result = await self.db.execute(
            select(Favorite.product_id)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at, Favorite.product_id),
        )
        return [ProductId(pid) for pid in result.scalars().all()]
