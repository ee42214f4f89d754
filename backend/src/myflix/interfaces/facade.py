"""MyflixFacade — the single entry point to the application layer.

All routers go through this facade instead of calling application functions directly.
"""
from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

from myflix.application.catalog import queries as catalog_queries
from myflix.application.identity import commands as id_commands
from myflix.application.identity import favorites as id_favorites
from myflix.application.identity.commands import LoginCredentials
from myflix.application.identity.strategies import CredentialVerifier, TokenVerifier
from myflix.domain.catalog.entities import Director, Genre, Movie
from myflix.domain.identity.entities import User, UserUpdate

if TYPE_CHECKING:
    from myflix.application.identity.commands import LoginResult


class MyflixFacade:
    """Aggregates all application use cases. Injected via FastAPI dependency."""

    def __init__(self, user_repo, movie_repo) -> None:
        self._user_repo = user_repo
        self._movie_repo = movie_repo
        self._credential_verifier = CredentialVerifier(user_repo)
        self._token_verifier = TokenVerifier(user_repo)

    # ── Authentication ────────────────────────────────────────────────────────

    async def login(self, username: str, password: str) -> "LoginResult":
        return await id_commands.login_user(
            credentials=LoginCredentials(username=username, password=password),
            verifier=self._credential_verifier,
        )

    async def authenticate_token(self, token: str) -> User:
        return await self._token_verifier.authenticate(token)

    # ── Users ─────────────────────────────────────────────────────────────────

    async def register(
        self, username: str, password: str, email: str, birthday: date | None = None
    ) -> User:
        return await id_commands.register_user(
            username=username, password=password, email=email, birthday=birthday,
            user_repo=self._user_repo,
        )

    async def update_user(self, user_id: UUID, update: UserUpdate) -> User:
        return await id_commands.update_user(user_id=user_id, update=update, user_repo=self._user_repo)

    async def deregister(self, user_id: UUID) -> None:
        await id_commands.deregister_user(user_id=user_id, user_repo=self._user_repo)

    # ── Favorites ─────────────────────────────────────────────────────────────

    async def add_favorite(self, user_id: UUID, movie_id: UUID) -> User:
        return await id_favorites.add_favorite(
            user_id=user_id, movie_id=movie_id,
            user_repo=self._user_repo, movie_repo=self._movie_repo,
        )

    async def remove_favorite(self, user_id: UUID, movie_id: UUID) -> User:
        return await id_favorites.remove_favorite(
            user_id=user_id, movie_id=movie_id, user_repo=self._user_repo,
        )

    # ── Catalog ───────────────────────────────────────────────────────────────

    async def list_movies(self) -> list[Movie]:
        return await catalog_queries.list_movies(self._movie_repo)

    async def get_movie(self, title: str) -> Movie:
        return await catalog_queries.get_movie_by_title(title, self._movie_repo)

    async def get_genre(self, name: str) -> Genre:
        return await catalog_queries.get_genre_by_name(name, self._movie_repo)

    async def get_director(self, name: str) -> Director:
        return await catalog_queries.get_director_by_name(name, self._movie_repo)
