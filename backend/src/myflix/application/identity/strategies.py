"""The two authentication strategies used by the route layer.

``CredentialVerifier`` guards ``/login``; ``TokenVerifier`` guards every
protected route. Routers pick one explicitly.
"""
from __future__ import annotations

import abc
import logging
from typing import Generic, TypeVar

from myflix.application.errors import UnknownIdentityError
from myflix.application.identity.commands import LoginCredentials, authenticate_user
from myflix.domain.identity.entities import User
from myflix.domain.identity.repositories import IUserRepository
from myflix.infrastructure.auth.jwt import decode_access_token

logger = logging.getLogger(__name__)

C = TypeVar("C")


class AuthStrategy(abc.ABC, Generic[C]):
    def __init__(self, user_repo: IUserRepository) -> None:
        self._user_repo = user_repo

    @abc.abstractmethod
    async def authenticate(self, credentials: C) -> User:
        """Resolve ``credentials`` to a User or raise an AuthError."""


class CredentialVerifier(AuthStrategy[LoginCredentials]):
    async def authenticate(self, credentials: LoginCredentials) -> User:
        return await authenticate_user(
            username=credentials.username,
            password=credentials.password,
            user_repo=self._user_repo,
        )


class TokenVerifier(AuthStrategy[str]):
    async def authenticate(self, credentials: str) -> User:
        # signature and expiry first; the payload is untrusted until then
        claims = decode_access_token(credentials)
        user = await self._user_repo.get_by_id(claims.user_id)
        if user is None:
            logger.info("Token subject %s no longer exists", claims.user_id)
            raise UnknownIdentityError("Token subject no longer exists")
        return user
