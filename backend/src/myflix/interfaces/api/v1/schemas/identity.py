"""Pydantic v2 schemas for identity endpoints."""
import re
from datetime import date
from uuid import UUID

from pydantic import BaseModel, EmailStr, field_validator

from myflix.domain.identity.entities import User, UserUpdate
from myflix.domain.identity.value_objects import Email, Username

_USERNAME_RE = re.compile(r"^[a-zA-Z0-9]{5,50}$")


def _check_username(v: str) -> str:
    if not _USERNAME_RE.match(v):
        raise ValueError("Username must be 5-50 alphanumeric characters")
    return v


class RegisterRequest(BaseModel):
    username: str
    password: str
    email: EmailStr
    birthday: date | None = None

    @field_validator("username")
    @classmethod
    def username_valid(cls, v: str) -> str:
        return _check_username(v)

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


class LoginRequest(BaseModel):
    username: str
    password: str


class UserUpdateRequest(BaseModel):
    """Every field is optional; only the ones sent are applied."""
    username: str | None = None
    password: str | None = None
    email: EmailStr | None = None
    birthday: date | None = None

    @field_validator("username")
    @classmethod
    def username_valid(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("Username cannot be null")
        return _check_username(v)

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str | None) -> str | None:
        if not v:
            raise ValueError("Password cannot be empty")
        return v

    @field_validator("email")
    @classmethod
    def email_not_null(cls, v: str | None) -> str | None:
        if v is None:
            raise ValueError("Email cannot be null")
        return v

    def to_domain(self) -> UserUpdate:
        sent = self.model_fields_set
        kwargs = {}
        if "username" in sent:
            kwargs["username"] = Username(self.username)
        if "password" in sent:
            kwargs["password"] = self.password
        if "email" in sent:
            kwargs["email"] = Email(str(self.email))
        if "birthday" in sent:
            kwargs["birthday"] = self.birthday
        return UserUpdate(**kwargs)


class UserResponse(BaseModel):
    id: UUID
    username: str
    email: str
    birthday: date | None
    favorite_movies: list[UUID]

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=str(user.username),
            email=str(user.email),
            birthday=user.birthday,
            favorite_movies=sorted(user.favorites, key=str),
        )


class LoginResponse(BaseModel):
    user: UserResponse
    token: str
