"""Service Wiring — FastAPI dependencies that assemble services per request.

Invariants:
    - One AsyncSession per request, shared by every repository of that request
    - Credential and token collaborators are process-wide (stateless, cached)
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config import get_settings
from storefront.db.favorite_repository import SqlFavoriteRepository
from storefront.db.product_repository import SqlProductRepository
from storefront.db.user_repository import SqlUserRepository
from storefront.infrastructure.credentials import BcryptPasswordHasher
from storefront.infrastructure.database import get_db
from storefront.infrastructure.tokens import JwtTokenSigner
from storefront.services.product_service import ProductService
from storefront.services.user_service import UserService


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=get_settings().password_hash_rounds)


@lru_cache
def get_token_signer() -> JwtTokenSigner:
    settings = get_settings()
    return JwtTokenSigner(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


async def get_product_service(
    db: AsyncSession = Depends(get_db),
) -> ProductService:
    return ProductService(
        SqlProductRepository(db),
        SqlFavoriteRepository(db),
        SqlUserRepository(db),
    )


async def get_user_service(
    db: AsyncSession = Depends(get_db),
    credentials: BcryptPasswordHasher = Depends(get_password_hasher),
    tokens: JwtTokenSigner = Depends(get_token_signer),
) -> UserService:
    return UserService(SqlUserRepository(db), credentials, tokens)
