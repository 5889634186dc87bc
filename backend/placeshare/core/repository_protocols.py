"""Boundary Protocols - contracts between services and storage/provider shells.

Invariants:
    - Services NEVER import concrete repositories - dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the API layer via dependency injection
    - Repositories hand out copies: mutating a returned entity never changes storage

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO (database, network)
"""

from typing import Protocol

from placeshare.core.domain_types import Coordinates, Place, PlaceId, User, UserId
from placeshare.core.result import Result


class PlaceRepository(Protocol):
    """Contract for place persistence."""
    async def get(self, place_id: PlaceId) -> Place | None: ...
    async def list_by_owner(self, user_id: UserId) -> list[Place]: ...
    async def insert(self, place: Place) -> None: ...
    async def update(self, place: Place) -> None: ...
    async def delete(self, place_id: PlaceId) -> None: ...


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def get(self, user_id: UserId) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...
    async def list_all(self) -> list[User]: ...
    async def insert(self, user: User) -> bool:
        """Store the user; False (nothing stored) when the email is taken."""
        ...
    async def add_place(self, user_id: UserId, place_id: PlaceId) -> None: ...
    async def remove_place(self, user_id: UserId, place_id: PlaceId) -> None: ...


class CoordinateResolver(Protocol):
    """Contract for address -> coordinates resolution."""
    async def resolve(self, address: str) -> Result[Coordinates]: ...
