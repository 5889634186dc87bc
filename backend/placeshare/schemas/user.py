"""User Schemas - request validation and response shapes for /api/users.

Invariants:
    - UserSignup: name non-empty, email valid syntax, password >= 6 chars
    - UserLogin: email valid syntax, password non-empty
    - Emails are lower-cased before reaching services
    - Passwords are never stripped and never appear in responses
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from placeshare.core.domain_types import User
from placeshare.schemas.common import NonEmptyText


class UserSignup(BaseModel):
    name: NonEmptyText
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    places: list[str]

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id, name=user.name, email=user.email,
            places=list(user.places),
        )


class UserEnvelope(BaseModel):
    user: UserResponse


class UserListEnvelope(BaseModel):
    users: list[UserResponse]


class LoginResponse(BaseModel):
    message: str
    user: UserResponse
