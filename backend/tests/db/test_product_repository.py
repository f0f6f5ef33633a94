"""Product Repository — verifies SQL semantics against an in-memory database.

Tests:
    - Search criteria combine as a conjunction; name match is case-insensitive
    - LIKE wildcards in the name criterion are matched literally
    - A store failure during search is raised as DatabaseError with the driver message
    - Quantity increments are computed by the store and may go negative
    - Conditional writes on a missing id report no match (None / False)
    - delete removes the product's reviews and favorite rows
    - find_page / find_by_ids ordering
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from storefront.core.errors import DatabaseError
from storefront.core.product_search import ProductFilter
from storefront.db.favorite_repository import SqlFavoriteRepository
from storefront.db.product_repository import SqlProductRepository
from storefront.db.user_repository import SqlUserRepository
from storefront.models.favorite import Favorite
from storefront.models.review import Review


def _data(name="Test Product", price=10.0, quantity=5, category=None):
    return {
        "name": name, "description": "desc", "image": "img.png",
        "price": price, "quantity": quantity, "category": category,
    }


def _matches(criteria: ProductFilter, product) -> bool:
    """In-memory reading of the search criteria, used to cross-check the SQL."""
    if criteria.name is not None and criteria.name.lower() not in product.name.lower():
        return False
    if criteria.category is not None and product.category != criteria.category:
        return False
    if criteria.min_price is not None and product.price < criteria.min_price:
        return False
    if criteria.max_price is not None and product.price > criteria.max_price:
        return False
    return True


@pytest.fixture
async def repo(test_db):
    return SqlProductRepository(test_db)


@pytest.fixture
async def catalog(repo):
    """Five products spanning names, categories and prices."""
    return [
        await repo.insert(_data("Test Phone", 10.0, category="electronics")),
        await repo.insert(_data("Test Cable", 25.0, category="electronics")),
        await repo.insert(_data("test book", 12.0, category="books")),
        await repo.insert(_data("Laptop", 5.0, category="electronics")),
        await repo.insert(_data("Cheap Test", 20.0, category="electronics")),
    ]


async def test_insert_assigns_id_and_empty_reviews(repo):
    product = await repo.insert(_data())
    assert product.id is not None
    assert product.reviews == []


async def test_search_conjunction(repo, catalog):
    result = await repo.search(ProductFilter.build(
        name="Test", category="electronics", min_price=5, max_price=20,
    ))
    assert [p.name for p in result] == ["Test Phone", "Cheap Test"]


async def test_search_name_is_case_insensitive(repo, catalog):
    result = await repo.search(ProductFilter.build(name="TEST"))
    assert {p.name for p in result} == {
        "Test Phone", "Test Cable", "test book", "Cheap Test",
    }


async def test_search_empty_filter_returns_all(repo, catalog):
    assert len(await repo.search(ProductFilter())) == len(catalog)


@pytest.mark.parametrize("criteria", [
    ProductFilter.build(category="electronics", max_price=20),
    ProductFilter.build(name="test", min_price=12),
    ProductFilter.build(name="cable", category="books"),
])
async def test_search_agrees_with_in_memory_reading(repo, catalog, criteria):
    result = await repo.search(criteria)
    assert [p.id for p in result] == [p.id for p in catalog if _matches(criteria, p)]


async def test_search_wildcards_match_literally(repo):
    await repo.insert(_data("100% cotton"))
    await repo.insert(_data("plain cotton"))
    result = await repo.search(ProductFilter.build(name="%"))
    assert [p.name for p in result] == ["100% cotton"]


async def test_increment_quantity_adds_delta(repo):
    product = await repo.insert(_data(quantity=10))
    updated = await repo.increment_quantity(product.id, -3)
    assert updated.quantity == 7
    updated = await repo.increment_quantity(product.id, -8)
    assert updated.quantity == -1


async def test_update_changes_only_given_columns(repo):
    product = await repo.insert(_data(price=10.0, category="books"))
    updated = await repo.update(product.id, {"price": 12.5})
    assert updated.price == 12.5
    assert updated.category == "books"


async def test_writes_on_missing_id_report_no_match(repo):
    assert await repo.update(999, {"price": 1.0}) is None
    assert await repo.increment_quantity(999, 1) is None
    assert await repo.delete(999) is False


async def test_delete_removes_reviews_and_favorites(repo, test_db):
    product = await repo.insert(_data())
    await repo.add_review(product.id, {"author": "a", "rating": 5, "comment": "ok"})
    owner = await SqlUserRepository(test_db).insert(
        {"username": "alice", "password": "hash"},
    )
    await SqlFavoriteRepository(test_db).add(owner.id, product.id)

    assert await repo.delete(product.id) is True

    assert await repo.find_by_id(product.id) is None
    reviews = await test_db.scalar(select(func.count()).select_from(Review))
    favorites = await test_db.scalar(select(func.count()).select_from(Favorite))
    assert (reviews, favorites) == (0, 0)


async def test_reviews_listed_in_insertion_order(repo):
    product = await repo.insert(_data())
    for rating in (3, 5, 1):
        await repo.add_review(product.id, {"author": "a", "rating": rating, "comment": ""})
    assert [r.rating for r in await repo.list_reviews(product.id)] == [3, 5, 1]


async def test_find_page_uses_id_order(repo, catalog):
    page = await repo.find_page(offset=2, limit=2)
    assert [p.id for p in page] == [catalog[2].id, catalog[3].id]
    assert await repo.find_page(offset=10, limit=2) == []


async def test_find_by_ids_keeps_order_and_skips_missing(repo, catalog):
    ids = [catalog[3].id, 999, catalog[0].id]
    assert [p.id for p in await repo.find_by_ids(ids)] == [catalog[3].id, catalog[0].id]


async def test_search_store_failure_raises_database_error():
    db = AsyncMock()
    db.execute.side_effect = OperationalError(
        "SELECT", {}, Exception("no such table: products"),
    )

    with pytest.raises(DatabaseError) as exc_info:
        await SqlProductRepository(db).search(ProductFilter.build(name="x"))

    assert "no such table: products" in exc_info.value.detail
    assert isinstance(exc_info.value.__cause__, OperationalError)
    db.rollback.assert_awaited_once()
