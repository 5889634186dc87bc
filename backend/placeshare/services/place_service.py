"""Place Service - get, list-by-owner, create, update and delete for places.

Invariants:
    - create_place resolves coordinates BEFORE constructing or storing anything;
      a resolver failure leaves storage untouched
    - update_place changes title/description only (no re-resolution of address)
    - delete_place detaches the id from its owner's place list
    - list_places_by_user returns Ok([]) for owners without places
    - Every method returns a Result; nothing raised for expected failures

Design Decisions:
    - No referential integrity for creator: a place whose creator matches no
      user is stored and logged as a warning
"""

import logging

from placeshare.core.domain_types import Place, PlaceId, UserId, new_place_id
from placeshare.core.errors import ResourceNotFoundError
from placeshare.core.repository_protocols import (
    CoordinateResolver, PlaceRepository, UserRepository,
)
from placeshare.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class PlaceService:
    """Resource operations for places."""

    def __init__(
        self,
        places: PlaceRepository,
        users: UserRepository,
        resolver: CoordinateResolver,
    ):
        self.places = places
        self.users = users
        self.resolver = resolver

    async def get_place(self, place_id: PlaceId) -> Result[Place]:
        place = await self.places.get(place_id)
        if place is None:
            return Err(ResourceNotFoundError("place", place_id))
        return Ok(place)

    async def list_places_by_user(self, user_id: UserId) -> Result[list[Place]]:
        return Ok(await self.places.list_by_owner(user_id))

    async def create_place(
        self,
        title: str,
        description: str,
        address: str,
        creator: UserId | None = None,
    ) -> Result[Place]:
        resolved = await self.resolver.resolve(address)
        if isinstance(resolved, Err):
            return resolved

        place = Place(
            id=new_place_id(),
            title=title,
            description=description,
            address=address,
            location=resolved.value,
            creator=creator,
        )
        await self.places.insert(place)
        if creator is not None:
            await self._attach_to_owner(place)

        logger.info(
            f"Created place '{place.title}'",
            extra={"place_id": place.id, "user_id": creator},
        )
        return Ok(place)

    async def update_place(
        self, place_id: PlaceId, title: str, description: str,
    ) -> Result[Place]:
        place = await self.places.get(place_id)
        if place is None:
            return Err(ResourceNotFoundError("place", place_id))

        place.title = title
        place.description = description
        await self.places.update(place)
        return Ok(place)

    async def delete_place(self, place_id: PlaceId) -> Result[Place]:
        place = await self.places.get(place_id)
        if place is None:
            return Err(ResourceNotFoundError("place", place_id))

        await self.places.delete(place_id)
        if place.creator is not None:
            await self.users.remove_place(place.creator, place_id)

        logger.info("Deleted place", extra={"place_id": place_id})
        return Ok(place)

    async def _attach_to_owner(self, place: Place) -> None:
        owner = await self.users.get(place.creator)
        if owner is None:
            logger.warning(
                "Place creator does not match any user",
                extra={"place_id": place.id, "user_id": place.creator},
            )
            return
        await self.users.add_place(owner.id, place.id)
