"""User Service - list, signup and login.

Invariants:
    - Signup rejects an already-registered email with UserExistsError and
      leaves the existing record untouched, including when two signups for
      the same email race (the repository insert is the final check)
    - Passwords are hashed (PBKDF2) before storage; plaintext is never stored
    - Login returns the SAME InvalidCredentialsError for unknown email and wrong
      password, and runs one hash verification in both cases

Design Decisions:
    - Hashing runs in a worker thread (asyncio.to_thread): PBKDF2 is CPU-bound
      and must not stall other requests on the event loop
"""

import asyncio
import logging
from functools import lru_cache

from placeshare.core.domain_types import User, new_user_id
from placeshare.core.errors import InvalidCredentialsError, UserExistsError
from placeshare.core.passwords import (
    DEFAULT_ITERATIONS, hash_password, verify_password,
)
from placeshare.core.repository_protocols import UserRepository
from placeshare.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_hash(iterations: int) -> str:
    return hash_password("placeshare-dummy-password", iterations)


class UserService:
    """Resource operations for users."""

    def __init__(
        self, users: UserRepository, hash_iterations: int = DEFAULT_ITERATIONS,
    ):
        self.users = users
        self.hash_iterations = hash_iterations

    async def list_users(self) -> Result[list[User]]:
        return Ok(await self.users.list_all())

    async def signup(self, name: str, email: str, password: str) -> Result[User]:
        if await self.users.get_by_email(email) is not None:
            return Err(UserExistsError())

        password_hash = await asyncio.to_thread(
            hash_password, password, self.hash_iterations,
        )
        user = User(
            id=new_user_id(), name=name, email=email,
            password_hash=password_hash, places=[],
        )
        # A concurrent signup may have taken the email while hashing.
        if not await self.users.insert(user):
            return Err(UserExistsError())
        logger.info("User signed up", extra={"user_id": user.id})
        return Ok(user)

    async def login(self, email: str, password: str) -> Result[User]:
        user = await self.users.get_by_email(email)
        if user is not None:
            stored = user.password_hash
        else:
            stored = await asyncio.to_thread(_dummy_hash, self.hash_iterations)

        matches = await asyncio.to_thread(verify_password, password, stored)
        if user is None or not matches:
            return Err(InvalidCredentialsError())
        return Ok(user)
