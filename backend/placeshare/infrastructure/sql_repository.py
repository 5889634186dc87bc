"""SQL Repositories - SQLAlchemy async implementations of the storage protocols.

Invariants:
    - Each write method is one atomic single-entity operation (one commit)
    - ORM rows never leave this module: callers receive domain dataclasses
    - update() writes only title/description; location and creator are immutable
    - A users.email unique violation on insert is reported as False, not raised
    - Other SQLAlchemy errors propagate to DatabaseSessionManager, which maps them to DatabaseError
"""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from placeshare.core.domain_types import (
    Coordinates, Place, PlaceId, User, UserId,
)
from placeshare.models.place import Place as PlaceModel
from placeshare.models.user import User as UserModel


class SqlPlaceRepository:
    """PlaceRepository backed by the places table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, place_id: PlaceId) -> Place | None:
        row = await self.db.get(PlaceModel, place_id)
        return _to_place(row) if row else None

    async def list_by_owner(self, user_id: UserId) -> list[Place]:
        result = await self.db.execute(
            select(PlaceModel)
            .where(PlaceModel.creator_id == user_id)
            .order_by(PlaceModel.created_at),
        )
        return [_to_place(row) for row in result.scalars().all()]

    async def insert(self, place: Place) -> None:
        self.db.add(PlaceModel(
            id=place.id,
            title=place.title,
            description=place.description,
            address=place.address,
            lat=place.location.lat,
            lng=place.location.lng,
            creator_id=place.creator,
        ))
        await self.db.commit()

    async def update(self, place: Place) -> None:
        row = await self.db.get(PlaceModel, place.id)
        if row is None:
            return
        row.title = place.title
        row.description = place.description
        await self.db.commit()

    async def delete(self, place_id: PlaceId) -> None:
        await self.db.execute(
            delete(PlaceModel).where(PlaceModel.id == place_id),
        )
        await self.db.commit()


class SqlUserRepository:
    """UserRepository backed by the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: UserId) -> User | None:
        row = await self.db.get(UserModel, user_id)
        return _to_user(row) if row else None

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(UserModel).where(UserModel.email == email),
        )
        row = result.scalar_one_or_none()
        return _to_user(row) if row else None

    async def list_all(self) -> list[User]:
        result = await self.db.execute(
            select(UserModel).order_by(UserModel.created_at),
        )
        return [_to_user(row) for row in result.scalars().all()]

    async def insert(self, user: User) -> bool:
        self.db.add(UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            place_ids=list(user.places),
        ))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return False
        return True

    async def add_place(self, user_id: UserId, place_id: PlaceId) -> None:
        row = await self.db.get(UserModel, user_id)
        if row is None or place_id in row.place_ids:
            return
        row.place_ids = [*row.place_ids, place_id]
        await self.db.commit()

    async def remove_place(self, user_id: UserId, place_id: PlaceId) -> None:
        row = await self.db.get(UserModel, user_id)
        if row is None or place_id not in row.place_ids:
            return
        row.place_ids = [p for p in row.place_ids if p != place_id]
        await self.db.commit()


def _to_place(row: PlaceModel) -> Place:
    return Place(
        id=PlaceId(row.id),
        title=row.title,
        description=row.description,
        address=row.address,
        location=Coordinates(lat=row.lat, lng=row.lng),
        creator=UserId(row.creator_id) if row.creator_id else None,
    )


def _to_user(row: UserModel) -> User:
    return User(
        id=UserId(row.id),
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        places=[PlaceId(p) for p in row.place_ids],
    )
