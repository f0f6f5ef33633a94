"""Credential Collaborator — bcrypt password hashing via pwdlib.

Invariants:
    - Stored secrets are bcrypt hashes with the configured cost factor (default 10)
    - hash()/verify() never run on the event loop thread (bcrypt is CPU-bound)
"""

import asyncio

from pwdlib import PasswordHash
from pwdlib.hashers.bcrypt import BcryptHasher


class BcryptPasswordHasher:
    """PasswordHasher implementation backed by pwdlib's bcrypt hasher."""

    def __init__(self, rounds: int = 10):
        self._context = PasswordHash((BcryptHasher(rounds=rounds),))

    async def hash(self, plaintext: str) -> str:
        return await asyncio.to_thread(self._context.hash, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        return await asyncio.to_thread(self._context.verify, plaintext, hashed)
