"""SQLAlchemy ORM models for the catalog schema."""
from uuid import UUID

from sqlalchemy import ARRAY, Boolean, Index, Integer, Text
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column

from myflix.infrastructure.database.connection import Base


class MovieModel(Base):
    __tablename__ = "movies"
    __table_args__ = (
        Index("ix_movies_title", "title"),
        Index("ix_movies_genre_name", "genre_name"),
        Index("ix_movies_director_name", "director_name"),
        {"schema": "catalog"},
    )

    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    genre_name: Mapped[str] = mapped_column(Text, nullable=False)
    genre_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    director_name: Mapped[str] = mapped_column(Text, nullable=False)
    director_bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    director_birth_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    director_death_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    actors: Mapped[list[str]] = mapped_column(ARRAY(Text), nullable=False, default=list)
    image_path: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
