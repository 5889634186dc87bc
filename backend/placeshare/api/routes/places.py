"""Place Routes - CRUD endpoints for /api/places.

Invariants:
    - Request bodies validated by PlaceCreate/PlaceUpdate before the service runs
    - Each handler calls exactly one service operation and unwraps its Result once
    - Place creation is cancelled if the client disconnects mid-geocoding
"""

from fastapi import APIRouter, Depends, Request, status

from placeshare.api.dependencies import get_place_service
from placeshare.api.routes.route_helpers import cancel_on_disconnect, unwrap
from placeshare.core.domain_types import PlaceId, UserId
from placeshare.schemas.place import (
    MessageResponse, PlaceCreate, PlaceEnvelope, PlaceListEnvelope,
    PlaceResponse, PlaceUpdate,
)
from placeshare.services.place_service import PlaceService

router = APIRouter(prefix="/api/places", tags=["places"])


@router.get("/user/{user_id}", response_model=PlaceListEnvelope)
async def list_places_by_user(
    user_id: str, service: PlaceService = Depends(get_place_service),
):
    """List places created by a user. Empty list when the user has none."""
    places = unwrap(await service.list_places_by_user(UserId(user_id)))
    return PlaceListEnvelope(
        places=[PlaceResponse.from_domain(p) for p in places],
    )


@router.get("/{place_id}", response_model=PlaceEnvelope)
async def get_place(
    place_id: str, service: PlaceService = Depends(get_place_service),
):
    place = unwrap(await service.get_place(PlaceId(place_id)))
    return PlaceEnvelope(place=PlaceResponse.from_domain(place))


@router.post(
    "", response_model=PlaceEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_place(
    body: PlaceCreate,
    request: Request,
    service: PlaceService = Depends(get_place_service),
):
    """Create a place after resolving its address to coordinates."""
    result = await cancel_on_disconnect(
        request,
        service.create_place(
            title=body.title,
            description=body.description,
            address=body.address,
            creator=UserId(body.creator) if body.creator else None,
        ),
    )
    return PlaceEnvelope(place=PlaceResponse.from_domain(unwrap(result)))


@router.patch("/{place_id}", response_model=PlaceEnvelope)
async def update_place(
    place_id: str,
    body: PlaceUpdate,
    service: PlaceService = Depends(get_place_service),
):
    place = unwrap(await service.update_place(
        PlaceId(place_id), title=body.title, description=body.description,
    ))
    return PlaceEnvelope(place=PlaceResponse.from_domain(place))


@router.delete("/{place_id}", response_model=MessageResponse)
async def delete_place(
    place_id: str, service: PlaceService = Depends(get_place_service),
):
    unwrap(await service.delete_place(PlaceId(place_id)))
    return MessageResponse(message="Deleted place.")
