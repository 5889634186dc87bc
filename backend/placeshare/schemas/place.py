"""Place Schemas - request validation and response shapes for /api/places.

Invariants:
    - PlaceCreate: title non-empty, description >= 5 chars, address non-empty
    - PlaceUpdate: title non-empty, description >= 5 chars; address is not editable
    - PlaceResponse.location mirrors the resolver's pair exactly
"""

from pydantic import BaseModel

from placeshare.core.domain_types import Place
from placeshare.schemas.common import DescriptionText, NonEmptyText


class PlaceCreate(BaseModel):
    title: NonEmptyText
    description: DescriptionText
    address: NonEmptyText
    creator: NonEmptyText | None = None


class PlaceUpdate(BaseModel):
    title: NonEmptyText
    description: DescriptionText


class LocationResponse(BaseModel):
    lat: float
    lng: float


class PlaceResponse(BaseModel):
    id: str
    title: str
    description: str
    address: str
    location: LocationResponse
    creator: str | None

    @classmethod
    def from_domain(cls, place: Place) -> "PlaceResponse":
        return cls(
            id=place.id,
            title=place.title,
            description=place.description,
            address=place.address,
            location=LocationResponse(
                lat=place.location.lat, lng=place.location.lng,
            ),
            creator=place.creator,
        )


class PlaceEnvelope(BaseModel):
    place: PlaceResponse


class PlaceListEnvelope(BaseModel):
    places: list[PlaceResponse]


class MessageResponse(BaseModel):
    message: str
