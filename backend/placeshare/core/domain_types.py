"""Domain Types - entities and value types shared by services and repositories.

Invariants:
    - PlaceId and UserId are opaque strings (uuid4 hex form when generated here)
    - Coordinates are immutable once constructed
    - Place.location and Place.creator never change after creation
    - User.password_hash is never a plaintext password

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Plain dataclasses over ORM models: services stay storage-agnostic
"""

import uuid
from dataclasses import dataclass, field
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PlaceId = NewType("PlaceId", str)
UserId = NewType("UserId", str)


def new_place_id() -> PlaceId:
    return PlaceId(str(uuid.uuid4()))


def new_user_id() -> UserId:
    return UserId(str(uuid.uuid4()))


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair resolved from an address."""
    lat: float
    lng: float


# ─── Entities ────────────────────────────────────────────────────

@dataclass
class Place:
    id: PlaceId
    title: str
    description: str
    address: str
    location: Coordinates
    creator: UserId | None = None


@dataclass
class User:
    id: UserId
    name: str
    email: str
    password_hash: str
    places: list[PlaceId] = field(default_factory=list)
