"""Favorites mutation: set semantics over a user's favorite movie references.

``add_favorite`` is strict (a duplicate is an error the caller sees);
``remove_favorite`` is idempotent (removing an absent movie succeeds).
Both re-read the user right before mutating and persist with one save. There
is no version check, so concurrent writers to the same user are
last-writer-wins.
"""
from __future__ import annotations

import logging
from uuid import UUID

from myflix.application.errors import AlreadyFavoriteError, NotFoundError
from myflix.domain.catalog.repositories import IMovieRepository
from myflix.domain.identity.entities import User
from myflix.domain.identity.repositories import IUserRepository

logger = logging.getLogger(__name__)


async def _fresh_user(user_id: UUID, user_repo: IUserRepository) -> User:
    user = await user_repo.get_by_id(user_id, refresh=True)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def add_favorite(
    *,
    user_id: UUID,
    movie_id: UUID,
    user_repo: IUserRepository,
    movie_repo: IMovieRepository,
) -> User:
    if not await movie_repo.exists(movie_id):
        raise NotFoundError("Movie not found")

    user = await _fresh_user(user_id, user_repo)
    if user.has_favorite(movie_id):
        raise AlreadyFavoriteError("Movie already in favorites")

    user.favorites.add(movie_id)
    user.touch()
    user = await user_repo.save(user)
    logger.debug("User %s favorited movie %s", user_id, movie_id)
    return user


async def remove_favorite(
    *,
    user_id: UUID,
    movie_id: UUID,
    user_repo: IUserRepository,
) -> User:
    user = await _fresh_user(user_id, user_repo)
    if not user.has_favorite(movie_id):
        return user

    user.favorites.discard(movie_id)
    user.touch()
    user = await user_repo.save(user)
    logger.debug("User %s unfavorited movie %s", user_id, movie_id)
    return user
