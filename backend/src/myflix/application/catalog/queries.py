"""Catalog use-case queries. Straight reads; a miss is a NotFoundError."""
from myflix.application.errors import NotFoundError
from myflix.domain.catalog.entities import Director, Genre, Movie
from myflix.domain.catalog.repositories import IMovieRepository


async def list_movies(movie_repo: IMovieRepository) -> list[Movie]:
    return await movie_repo.list_all()


async def get_movie_by_title(title: str, movie_repo: IMovieRepository) -> Movie:
    movie = await movie_repo.get_by_title(title)
    if movie is None:
        raise NotFoundError("Movie not found")
    return movie


async def get_genre_by_name(name: str, movie_repo: IMovieRepository) -> Genre:
    genre = await movie_repo.get_genre_by_name(name)
    if genre is None:
        raise NotFoundError("Genre not found")
    return genre


async def get_director_by_name(name: str, movie_repo: IMovieRepository) -> Director:
    director = await movie_repo.get_director_by_name(name)
    if director is None:
        raise NotFoundError("Director not found")
    return director
