"""User Routes - list, signup and login under /api/users.

Invariants:
    - Signup/login bodies validated by UserSignup/UserLogin before the service runs
    - Login failures are indistinguishable (same status, same body)
"""

from fastapi import APIRouter, Depends, status

from placeshare.api.dependencies import get_user_service
from placeshare.api.routes.route_helpers import unwrap
from placeshare.schemas.user import (
    LoginResponse, UserEnvelope, UserListEnvelope, UserLogin, UserResponse,
    UserSignup,
)
from placeshare.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserListEnvelope)
async def list_users(service: UserService = Depends(get_user_service)):
    users = unwrap(await service.list_users())
    return UserListEnvelope(users=[UserResponse.from_domain(u) for u in users])


@router.post(
    "/signup", response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    body: UserSignup, service: UserService = Depends(get_user_service),
):
    user = unwrap(await service.signup(body.name, body.email, body.password))
    return UserEnvelope(user=UserResponse.from_domain(user))


@router.post("/login", response_model=LoginResponse)
async def login(
    body: UserLogin, service: UserService = Depends(get_user_service),
):
    user = unwrap(await service.login(body.email, body.password))
    return LoginResponse(
        message="Logged in!", user=UserResponse.from_domain(user),
    )
