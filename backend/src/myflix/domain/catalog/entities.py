"""Domain entities for the Catalog bounded context (read-only here)."""
from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class Genre:
    name: str
    description: str | None = None


@dataclass(frozen=True)
class Director:
    name: str
    bio: str | None = None
    birth_year: int | None = None
    death_year: int | None = None


@dataclass
class Movie:
    id: UUID
    title: str
    description: str
    genre: Genre
    director: Director
    actors: list[str] = field(default_factory=list)
    image_path: str | None = None
    featured: bool = False
