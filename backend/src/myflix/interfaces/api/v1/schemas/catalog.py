"""Pydantic v2 schemas for catalog endpoints."""
from uuid import UUID

from pydantic import BaseModel


class GenreResponse(BaseModel):
    name: str
    description: str | None

    model_config = {"from_attributes": True}


class DirectorResponse(BaseModel):
    name: str
    bio: str | None
    birth_year: int | None
    death_year: int | None

    model_config = {"from_attributes": True}


class MovieResponse(BaseModel):
    id: UUID
    title: str
    description: str
    genre: GenreResponse
    director: DirectorResponse
    actors: list[str]
    image_path: str | None
    featured: bool

    model_config = {"from_attributes": True}
