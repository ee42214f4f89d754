"""Repository ports for the Identity bounded context."""
from typing import Protocol
from uuid import UUID

from .entities import User


class IUserRepository(Protocol):
    async def get_by_id(self, user_id: UUID, *, refresh: bool = False) -> User | None: ...

    async def get_by_username(self, username: str) -> User | None: ...

    async def save(self, user: User) -> User: ...

    async def delete_by_id(self, user_id: UUID) -> bool: ...
