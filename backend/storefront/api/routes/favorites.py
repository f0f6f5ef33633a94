"""Favorite Routes — per-user favorite products.

Invariants:
    - Favorites are addressed through their owner (/users/{username}/favorites)
    - PUT is idempotent; DELETE of a product that is not a favorite still returns 204
"""

from fastapi import APIRouter, Depends, Response, status

from storefront.api.dependencies import get_product_service
from storefront.schemas.product import ProductResponse
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/api/v1/users/{username}/favorites", tags=["favorites"])


@router.get("", response_model=list[ProductResponse])
async def list_favorites(
    username: str, service: ProductService = Depends(get_product_service),
):
    return await service.list_favorites(username)


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def add_favorite(
    username: str,
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    await service.add_favorite(username, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(
    username: str,
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    await service.remove_favorite(username, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
