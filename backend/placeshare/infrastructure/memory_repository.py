"""In-Memory Repositories - dict-backed storage for single-process deployments and tests.

Invariants:
    - Insertion order preserved (dicts) so list results are stable
    - Entities are deep-copied on the way in and out: callers never share state
      with the store
    - remove_place on an unknown user or place id is a no-op
    - User insert checks and stores with no await in between, so concurrent
      signups for one email cannot both land

Design Decisions:
    - MemoryStore as a module-level singleton: single-process uvicorn only,
      state lost on restart
"""

import copy

from placeshare.core.domain_types import Place, PlaceId, User, UserId


class InMemoryPlaceRepository:
    """PlaceRepository over a plain dict."""

    def __init__(self):
        self._places: dict[PlaceId, Place] = {}

    async def get(self, place_id: PlaceId) -> Place | None:
        place = self._places.get(place_id)
        return copy.deepcopy(place) if place else None

    async def list_by_owner(self, user_id: UserId) -> list[Place]:
        return [
            copy.deepcopy(p) for p in self._places.values()
            if p.creator == user_id
        ]

    async def insert(self, place: Place) -> None:
        self._places[place.id] = copy.deepcopy(place)

    async def update(self, place: Place) -> None:
        if place.id in self._places:
            self._places[place.id] = copy.deepcopy(place)

    async def delete(self, place_id: PlaceId) -> None:
        self._places.pop(place_id, None)


class InMemoryUserRepository:
    """UserRepository over a plain dict."""

    def __init__(self):
        self._users: dict[UserId, User] = {}

    async def get(self, user_id: UserId) -> User | None:
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user else None

    async def get_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    async def list_all(self) -> list[User]:
        return [copy.deepcopy(u) for u in self._users.values()]

    async def insert(self, user: User) -> bool:
        if any(u.email == user.email for u in self._users.values()):
            return False
        self._users[user.id] = copy.deepcopy(user)
        return True

    async def add_place(self, user_id: UserId, place_id: PlaceId) -> None:
        user = self._users.get(user_id)
        if user and place_id not in user.places:
            user.places.append(place_id)

    async def remove_place(self, user_id: UserId, place_id: PlaceId) -> None:
        user = self._users.get(user_id)
        if user and place_id in user.places:
            user.places.remove(place_id)


class MemoryStore:
    """Process-wide pair of in-memory repositories."""

    def __init__(self):
        self.places = InMemoryPlaceRepository()
        self.users = InMemoryUserRepository()


memory_store = MemoryStore()
