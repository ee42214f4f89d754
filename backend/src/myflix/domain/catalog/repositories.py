"""Repository ports for the Catalog bounded context."""
from typing import Protocol
from uuid import UUID

from .entities import Director, Genre, Movie


class IMovieRepository(Protocol):
    async def exists(self, movie_id: UUID) -> bool: ...

    async def list_all(self) -> list[Movie]: ...

    async def get_by_title(self, title: str) -> Movie | None: ...

    async def get_genre_by_name(self, name: str) -> Genre | None: ...

    async def get_director_by_name(self, name: str) -> Director | None: ...
