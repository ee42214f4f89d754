"""Domain entities for the Identity bounded context."""
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Final
from uuid import UUID

from .value_objects import Email, PasswordHash, Username


@dataclass
class User:
    id: UUID
    username: Username
    email: Email
    password_hash: PasswordHash
    birthday: date | None = None
    favorites: set[UUID] = field(default_factory=set)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def has_favorite(self, movie_id: UUID) -> bool:
        return movie_id in self.favorites

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


class _Unset:
    """Marker for a field that was not supplied in an update."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset()


@dataclass(frozen=True)
class UserUpdate:
    """Partial profile update.

    Every field defaults to ``UNSET``; only fields explicitly supplied are
    applied. ``birthday=None`` clears the birthday, ``birthday=UNSET`` leaves
    it alone. ``password`` carries the new plaintext and is hashed on apply.
    """
    username: Username | _Unset = UNSET
    password: str | _Unset = UNSET
    email: Email | _Unset = UNSET
    birthday: date | None | _Unset = UNSET

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET

    @property
    def is_empty(self) -> bool:
        return not any(self.is_set(n) for n in ("username", "password", "email", "birthday"))
