"""User Repository — SQLAlchemy implementation of UserRepository.

Invariants:
    - username is the lookup key for every operation
    - insert of an already-registered username raises UsernameTakenError, including
      when a concurrent registration wins the race past the service's lookup
    - increment_saldo is computed by the store (saldo = saldo + delta)
    - store_token rolls back its own failed transaction and raises DatabaseError
"""

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import Username
from storefront.core.errors import DatabaseError, UsernameTakenError
from storefront.models.user import User


class SqlUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def find_by_username(self, username: Username) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def insert(self, data: dict[str, Any]) -> User:
        user = User(**data)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            if await self.find_by_username(data["username"]) is None:
                raise
            raise UsernameTakenError(data["username"])
        await self.db.refresh(user)
        return user

    async def update(
        self, username: Username, values: dict[str, Any],
    ) -> User | None:
        if not values:
            return await self.find_by_username(username)
        result = await self.db.execute(
            update(User).where(User.username == username).values(**values),
        )
        return await self._commit_and_reload(username, result.rowcount)

    async def increment_saldo(
        self, username: Username, delta: float,
    ) -> User | None:
        result = await self.db.execute(
            update(User)
            .where(User.username == username)
            .values(saldo=User.saldo + delta),
        )
        return await self._commit_and_reload(username, result.rowcount)

    async def store_token(self, username: Username, token: str) -> None:
        try:
            await self.db.execute(
                update(User).where(User.username == username).values(token=token),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(str(e), "token store") from e

    async def _commit_and_reload(
        self, username: Username, rowcount: int,
    ) -> User | None:
        if rowcount == 0:
            await self.db.rollback()
            return None
        await self.db.commit()
        result = await self.db.execute(
            select(User)
            .where(User.username == username)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()
