"""Boundary Protocols — contracts between core services and the persistence/credential shell.

Invariants:
    - Services NEVER import SQLAlchemy or ORM models — they speak these protocols only
    - Lookups return None on miss; the service turns absence into ResourceNotFoundError
    - Conditional mutations (update, delete, increment_*) return None/False when no row
      matched, so a lost race surfaces as NotFound instead of a silent success
    - Store failures a service reacts to (search, token store) are raised as DatabaseError
    - Implementations provided by storefront/db and storefront/infrastructure

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Repository and hasher methods async (DB, worker thread); TokenSigner.sign is sync
"""

from typing import Any, Protocol, Sequence

from storefront.core.domain_types import ProductId, Username
from storefront.core.product_search import ProductFilter


class ProductLike(Protocol):
    """Structural contract for Product records handed back by the repository."""
    id: int
    name: str
    description: str
    image: str
    price: float
    quantity: int
    category: str | None


class ReviewLike(Protocol):
    """Structural contract for Review records."""
    id: int
    product_id: int
    author: str
    rating: int
    comment: str


class UserLike(Protocol):
    """Structural contract for User records."""
    id: int
    username: str
    name: str | None
    password: str
    role: str
    phone_number: str | None
    saldo: float
    token: str | None


class ProductRepository(Protocol):
    """Contract for product persistence."""
    async def find_all(self) -> Sequence[ProductLike]: ...
    async def find_page(self, offset: int, limit: int) -> Sequence[ProductLike]: ...
    async def find_by_id(self, product_id: ProductId) -> ProductLike | None: ...
    async def find_by_ids(
        self, product_ids: Sequence[ProductId],
    ) -> Sequence[ProductLike]: ...
    async def insert(self, data: dict[str, Any]) -> ProductLike: ...
    async def update(
        self, product_id: ProductId, values: dict[str, Any],
    ) -> ProductLike | None: ...
    async def delete(self, product_id: ProductId) -> bool: ...
    async def increment_quantity(
        self, product_id: ProductId, delta: int,
    ) -> ProductLike | None: ...
    async def search(self, criteria: ProductFilter) -> Sequence[ProductLike]: ...
    async def add_review(
        self, product_id: ProductId, data: dict[str, Any],
    ) -> ReviewLike: ...
    async def list_reviews(self, product_id: ProductId) -> Sequence[ReviewLike]: ...


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def find_all(self) -> Sequence[UserLike]: ...
    async def find_by_username(self, username: Username) -> UserLike | None: ...
    async def insert(self, data: dict[str, Any]) -> UserLike: ...
    async def update(
        self, username: Username, values: dict[str, Any],
    ) -> UserLike | None: ...
    async def increment_saldo(
        self, username: Username, delta: float,
    ) -> UserLike | None: ...
    async def store_token(self, username: Username, token: str) -> None: ...


class FavoriteRepository(Protocol):
    """Contract for per-user favorite product ids."""
    async def add(self, user_id: int, product_id: ProductId) -> None: ...
    async def remove(self, user_id: int, product_id: ProductId) -> None: ...
    async def list_product_ids(self, user_id: int) -> list[ProductId]: ...


class PasswordHasher(Protocol):
    """Credential collaborator — one-way hash and comparison."""
    async def hash(self, plaintext: str) -> str: ...
    async def verify(self, plaintext: str, hashed: str) -> bool: ...


class TokenSigner(Protocol):
    """Token collaborator — signs claims into an opaque bearer token."""
    def sign(self, claims: dict[str, Any]) -> str: ...
