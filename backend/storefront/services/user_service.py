"""User Service — account creation, authentication, profile edit and balance top-up.

Invariants:
    - Passwords reach the repository only as hashes (create and both edit paths)
    - Login token persistence is best-effort: a store failure is logged, never raised
    - Every by-username mutation calls get_user first (NotFound on miss)
    - Records are returned unredacted; the HTTP boundary decides what to expose
"""

import logging
from typing import Any, Sequence

from storefront.core.domain_types import Username
from storefront.core.errors import (
    DatabaseError, FieldValidationError, InvalidCredentialsError,
    ResourceNotFoundError, UsernameTakenError,
)
from storefront.core.repository_protocols import (
    PasswordHasher, TokenSigner, UserLike, UserRepository,
)

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "password", "role", "phone_number")


class UserService:
    """Orchestrates the user repository with credential and token collaborators."""

    def __init__(
        self,
        users: UserRepository,
        credentials: PasswordHasher,
        tokens: TokenSigner,
    ):
        self.users = users
        self.credentials = credentials
        self.tokens = tokens

    async def create_user(self, user_data: dict[str, Any]) -> UserLike:
        username = user_data.get("username")
        if not username:
            raise FieldValidationError("Username is required", "username")
        if not user_data.get("password"):
            raise FieldValidationError("Password is required", "password")
        if await self.users.find_by_username(username) is not None:
            raise UsernameTakenError(username)

        record = {k: v for k, v in user_data.items() if v is not None}
        record["password"] = await self.credentials.hash(user_data["password"])
        user = await self.users.insert(record)
        logger.info(f"User {username} registered", extra={"username": username})
        return user

    async def login_user(self, username: Username, password: str) -> dict[str, str]:
        user = await self.users.find_by_username(username)
        if user is None:
            raise ResourceNotFoundError("User", username, "User not found")
        if not await self.credentials.verify(password, user.password):
            raise InvalidCredentialsError()

        # Read before store_token: a failed write rolls back and expires the record.
        role, stored_username = user.role, user.username
        token = self.tokens.sign({"userId": user.id, "role": role})
        try:
            await self.users.store_token(stored_username, token)
        except DatabaseError as e:
            logger.warning(
                f"Error storing token for {stored_username}: {e}",
                extra={"username": stored_username},
            )
        return {"token": token, "role": role, "username": stored_username}

    async def get_user(self, username: Username) -> UserLike:
        user = await self.users.find_by_username(username)
        if user is None:
            raise ResourceNotFoundError("User", username, f"User {username} not found")
        return user

    async def list_users(self) -> Sequence[UserLike]:
        return await self.users.find_all()

    async def replace_user(
        self, username: Username, user_data: dict[str, Any],
    ) -> UserLike:
        """Overwrite the full profile with the supplied state.

        The password is a credential rather than profile state: it is only
        replaced when a new one is supplied.
        """
        await self.get_user(username)
        values = {key: user_data.get(key) for key in PROFILE_FIELDS}
        if values["password"] is None:
            del values["password"]
        return await self._apply_update(username, values)

    async def edit_user(
        self, username: Username, user_data: dict[str, Any],
    ) -> UserLike:
        """Merge only the supplied profile fields."""
        await self.get_user(username)
        values = {k: v for k, v in user_data.items() if k in PROFILE_FIELDS}
        return await self._apply_update(username, values)

    async def add_balance(
        self, username: Username, payload: dict[str, float],
    ) -> UserLike:
        await self.get_user(username)
        delta = payload["saldo"]
        user = await self.users.increment_saldo(username, delta)
        if user is None:
            raise ResourceNotFoundError("User", username, f"User {username} not found")
        logger.info(
            f"Saldo of {username} topped up by {delta}", extra={"username": username},
        )
        return user

    async def _apply_update(
        self, username: Username, values: dict[str, Any],
    ) -> UserLike:
        if values.get("password") is not None:
            values["password"] = await self.credentials.hash(values["password"])
        user = await self.users.update(username, values)
        if user is None:
            raise ResourceNotFoundError("User", username, f"User {username} not found")
        logger.info(f"User {username} updated", extra={"username": username})
        return user
