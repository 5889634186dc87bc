"""Dependencies - FastAPI providers wiring services to storage and the geocoder.

Invariants:
    - storage_backend == "memory" -> process-wide MemoryStore repositories
    - storage_backend == "database" -> SQL repositories sharing one AsyncSession per request
    - Services receive protocols only; tests swap providers via dependency_overrides
"""

from dataclasses import dataclass
from typing import AsyncGenerator

from fastapi import Depends

import placeshare.infrastructure.database as database
from placeshare.config import Settings, get_settings
from placeshare.core.repository_protocols import (
    CoordinateResolver, PlaceRepository, UserRepository,
)
from placeshare.infrastructure.geocoding_client import get_coordinate_resolver
from placeshare.infrastructure.memory_repository import memory_store
from placeshare.infrastructure.sql_repository import (
    SqlPlaceRepository, SqlUserRepository,
)
from placeshare.services.place_service import PlaceService
from placeshare.services.user_service import UserService


@dataclass
class Repositories:
    places: PlaceRepository
    users: UserRepository


async def get_repositories(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[Repositories, None]:
    """Yield the repositories for the configured storage backend."""
    if settings.storage_backend == "memory":
        yield Repositories(places=memory_store.places, users=memory_store.users)
        return

    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as db:
        yield Repositories(
            places=SqlPlaceRepository(db), users=SqlUserRepository(db),
        )


def get_place_service(
    repos: Repositories = Depends(get_repositories),
    resolver: CoordinateResolver = Depends(get_coordinate_resolver),
) -> PlaceService:
    return PlaceService(repos.places, repos.users, resolver)


def get_user_service(
    repos: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(repos.users, settings.password_hash_iterations)
