"""Catalog router: movies, genres, directors. All routes require a token."""
from fastapi import APIRouter, HTTPException, status

from myflix.application.errors import NotFoundError
from myflix.interfaces.api.v1.schemas.catalog import (
    DirectorResponse,
    GenreResponse,
    MovieResponse,
)
from myflix.interfaces.dependencies import CurrentUser, Facade

router = APIRouter(tags=["movies"])


@router.get("/movies", response_model=list[MovieResponse])
async def list_movies(facade: Facade, current_user: CurrentUser):
    movies = await facade.list_movies()
    return [MovieResponse.model_validate(m) for m in movies]


@router.get("/movies/{title}", response_model=MovieResponse)
async def get_movie(title: str, facade: Facade, current_user: CurrentUser):
    try:
        movie = await facade.get_movie(title)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")
    return MovieResponse.model_validate(movie)


@router.get("/genres/{name}", response_model=GenreResponse)
async def get_genre(name: str, facade: Facade, current_user: CurrentUser):
    try:
        genre = await facade.get_genre(name)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Genre not found")
    return GenreResponse.model_validate(genre)


@router.get("/directors/{name}", response_model=DirectorResponse)
async def get_director(name: str, facade: Facade, current_user: CurrentUser):
    try:
        director = await facade.get_director(name)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Director not found")
    return DirectorResponse.model_validate(director)
