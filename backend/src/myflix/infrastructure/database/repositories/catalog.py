"""Concrete SQLAlchemy repository implementations for the catalog context."""
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from myflix.domain.catalog.entities import Director, Genre, Movie
from myflix.infrastructure.database.models.catalog import MovieModel
from myflix.infrastructure.database.repositories.errors import translate_db_errors


class MovieRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_db_errors
    async def exists(self, movie_id: UUID) -> bool:
        stmt = select(exists().where(MovieModel.id == movie_id))
        return bool(await self._session.scalar(stmt))

    @translate_db_errors
    async def list_all(self) -> list[Movie]:
        stmt = select(MovieModel).order_by(MovieModel.title)
        result = await self._session.execute(stmt)
        return [_to_movie(r) for r in result.scalars()]

    @translate_db_errors
    async def get_by_title(self, title: str) -> Movie | None:
        row = await self._first(select(MovieModel).where(MovieModel.title == title))
        return _to_movie(row) if row else None

    @translate_db_errors
    async def get_genre_by_name(self, name: str) -> Genre | None:
        row = await self._first(select(MovieModel).where(MovieModel.genre_name == name))
        return Genre(name=row.genre_name, description=row.genre_description) if row else None

    @translate_db_errors
    async def get_director_by_name(self, name: str) -> Director | None:
        row = await self._first(select(MovieModel).where(MovieModel.director_name == name))
        return _to_director(row) if row else None

    async def _first(self, stmt) -> MovieModel | None:
        result = await self._session.execute(stmt.limit(1))
        return result.scalars().first()


# ── Mappers ───────────────────────────────────────────────────────────────────

def _to_director(m: MovieModel) -> Director:
    return Director(
        name=m.director_name,
        bio=m.director_bio,
        birth_year=m.director_birth_year,
        death_year=m.director_death_year,
    )


def _to_movie(m: MovieModel) -> Movie:
    return Movie(
        id=m.id,
        title=m.title,
        description=m.description,
        genre=Genre(name=m.genre_name, description=m.genre_description),
        director=_to_director(m),
        actors=list(m.actors or []),
        image_path=m.image_path,
        featured=m.featured,
    )
