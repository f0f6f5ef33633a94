"""Product Routes — catalog CRUD, search, pagination, stock and reviews.

Invariants:
    - Static paths (/paginated, /search) are registered before /{product_id}
    - PUT replaces the full product state; PATCH merges the fields the client sent
    - Errors propagate to the global handlers (NotFound → 404, SearchFailed → 400)
"""

from fastapi import APIRouter, Depends, Query, status

from storefront.api.dependencies import get_product_service
from storefront.config import get_settings
from storefront.core.domain_types import SortDirection, SortField
from storefront.core.product_search import ProductFilter
from storefront.schemas.product import (
    ProductCreate, ProductPatch, ProductReplace, ProductResponse,
    ReviewCreate, ReviewResponse, StockAdjustment,
)
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    sort: SortField | None = Query(None),
    order: SortDirection | None = Query(None),
    service: ProductService = Depends(get_product_service),
):
    """List all products, ordered by name ascending unless told otherwise."""
    return await service.list_products(sort, order)


@router.get("/paginated", response_model=list[ProductResponse])
async def list_products_page(
    page: int = Query(1, ge=1),
    size: int | None = Query(None, ge=1, le=100),
    service: ProductService = Depends(get_product_service),
):
    return await service.list_products_page(
        page, size or get_settings().default_page_size,
    )


@router.get("/search", response_model=list[ProductResponse])
async def search_products(
    name: str | None = Query(None),
    category: str | None = Query(None),
    min_price: float | None = Query(None, alias="minPrice"),
    max_price: float | None = Query(None, alias="maxPrice"),
    service: ProductService = Depends(get_product_service),
):
    """Search by name substring, exact category and inclusive price range."""
    criteria = ProductFilter.build(name, category, min_price, max_price)
    return await service.search_products(criteria)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int, service: ProductService = Depends(get_product_service),
):
    return await service.get_product(product_id)


@router.post(
    "", response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate, service: ProductService = Depends(get_product_service),
):
    return await service.create_product(body.model_dump())


@router.put("/{product_id}", response_model=ProductResponse)
async def replace_product(
    product_id: int,
    body: ProductReplace,
    service: ProductService = Depends(get_product_service),
):
    return await service.replace_product(product_id, body.model_dump())


@router.patch("/{product_id}", response_model=ProductResponse)
async def edit_product(
    product_id: int,
    body: ProductPatch,
    service: ProductService = Depends(get_product_service),
):
    return await service.edit_product(
        product_id, body.model_dump(exclude_unset=True),
    )


@router.delete("/{product_id}")
async def delete_product(
    product_id: int, service: ProductService = Depends(get_product_service),
):
    await service.delete_product(product_id)
    return {"message": "Product deleted successfully"}


@router.patch("/{product_id}/stock", response_model=ProductResponse)
async def update_stock(
    product_id: int,
    body: StockAdjustment,
    service: ProductService = Depends(get_product_service),
):
    return await service.update_stock(product_id, body.delta)


@router.get("/{product_id}/reviews", response_model=list[ReviewResponse])
async def list_reviews(
    product_id: int, service: ProductService = Depends(get_product_service),
):
    return await service.list_reviews(product_id)


@router.post(
    "/{product_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_review(
    product_id: int,
    body: ReviewCreate,
    service: ProductService = Depends(get_product_service),
):
    return await service.add_review(product_id, body.model_dump())
