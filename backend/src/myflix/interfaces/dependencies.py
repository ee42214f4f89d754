"""FastAPI dependency injection: DB session, facade and the protected-route guard."""
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from myflix.application.errors import TokenError
from myflix.domain.identity.entities import User
from myflix.infrastructure.database.connection import get_db_session
from myflix.interfaces.facade import MyflixFacade

logger = logging.getLogger(__name__)

# ── Session ───────────────────────────────────────────────────────────────────

_bearer = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with get_db_session() as session:
        yield session


def _build_facade(session: AsyncSession) -> MyflixFacade:
    from myflix.infrastructure.database.repositories.catalog import MovieRepository
    from myflix.infrastructure.database.repositories.identity import UserRepository

    return MyflixFacade(
        user_repo=UserRepository(session),
        movie_repo=MovieRepository(session),
    )


# scope="function": commit (or its failure) happens before the response is sent
async def get_facade(
    session: Annotated[AsyncSession, Depends(get_db, scope="function")],
) -> MyflixFacade:
    return _build_facade(session)


# ── Auth ──────────────────────────────────────────────────────────────────────

_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
    facade: Annotated[MyflixFacade, Depends(get_facade)],
) -> User:
    if credentials is None:
        raise _CREDENTIALS_EXCEPTION

    try:
        return await facade.authenticate_token(credentials.credentials)
    except TokenError as exc:
        logger.info("Bearer token rejected: %s", type(exc).__name__)
        raise _CREDENTIALS_EXCEPTION


def require_self(username: str, current_user: User) -> None:
    """Account routes act on the caller's own account only."""
    if str(current_user.username) != username:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed")


# Type aliases for cleaner signatures
Facade = Annotated[MyflixFacade, Depends(get_facade)]
CurrentUser = Annotated[User, Depends(get_current_user)]
