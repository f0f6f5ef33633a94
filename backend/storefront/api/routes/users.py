"""User Routes — registration, login, profile and balance.

Invariants:
    - Responses use UserResponse (password hash and token never leave the service)
    - Static paths (/register, /login) are registered before /{username}
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import get_user_service
from storefront.schemas.user import (
    BalanceTopUp, LoginRequest, LoginResponse, UserCreate, UserPatch,
    UserReplace, UserResponse,
)
from storefront.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def register_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    return await service.create_user(body.model_dump())


@router.post("/login", response_model=LoginResponse)
async def login_user(
    body: LoginRequest, service: UserService = Depends(get_user_service),
):
    return await service.login_user(body.username, body.password)


@router.get("/{username}", response_model=UserResponse)
async def get_user(
    username: str, service: UserService = Depends(get_user_service),
):
    return await service.get_user(username)


@router.put("/{username}", response_model=UserResponse)
async def replace_user(
    username: str,
    body: UserReplace,
    service: UserService = Depends(get_user_service),
):
    return await service.replace_user(username, body.model_dump())


@router.patch("/{username}", response_model=UserResponse)
async def edit_user(
    username: str,
    body: UserPatch,
    service: UserService = Depends(get_user_service),
):
    return await service.edit_user(username, body.model_dump(exclude_unset=True))


@router.post("/{username}/saldo", response_model=UserResponse)
async def add_balance(
    username: str,
    body: BalanceTopUp,
    service: UserService = Depends(get_user_service),
):
    """Top up the user's balance by the given amount."""
    return await service.add_balance(username, body.model_dump())
