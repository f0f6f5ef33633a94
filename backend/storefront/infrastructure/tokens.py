"""Token Collaborator — signs login claims into a JWT bearer token.

Invariants:
    - Claims are copied, never mutated; an `exp` claim is added on every signature
    - Verification is not offered here: no request path validates tokens in this service
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt


class JwtTokenSigner:
    """TokenSigner implementation backed by PyJWT."""

    def __init__(
        self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def sign(self, claims: dict[str, Any]) -> str:
        to_encode = claims.copy()
        expire = datetime.now(timezone.utc) + timedelta(minutes=self._expire_minutes)
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)
