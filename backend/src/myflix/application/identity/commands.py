"""Identity use-case commands: register, login, update, deregister."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from myflix.application.errors import (
    InvalidCredentialsError,
    NotFoundError,
    UserAlreadyExistsError,
)
from myflix.domain.identity.entities import User, UserUpdate
from myflix.domain.identity.repositories import IUserRepository
from myflix.domain.identity.value_objects import Email, Username
from myflix.infrastructure.auth.jwt import create_access_token
from myflix.infrastructure.auth.password import (
    hash_password,
    needs_rehash,
    verify_dummy,
    verify_password,
)

if TYPE_CHECKING:
    from myflix.application.identity.strategies import AuthStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginCredentials:
    username: str
    password: str


@dataclass
class LoginResult:
    user: User
    token: str
    expires_at: datetime


async def register_user(
    *,
    username: str,
    password: str,
    email: str,
    birthday: date | None = None,
    user_repo: IUserRepository,
) -> User:
    """Create a new account. Usernames are unique and case-sensitive."""
    if await user_repo.get_by_username(username):
        raise UserAlreadyExistsError("User already exists")

    user = User(
        id=uuid4(),
        username=Username(username),
        email=Email(email),
        password_hash=hash_password(password),
        birthday=birthday,
    )
    user = await user_repo.save(user)
    logger.info("Registered user %s", user.id)
    return user


async def authenticate_user(
    *,
    username: str,
    password: str,
    user_repo: IUserRepository,
) -> User:
    """Check a username/password pair.

    An unknown username and a wrong password raise the same error, and the
    unknown-username path still pays for one hash verification.
    """
    user = await user_repo.get_by_username(username)
    if user is None:
        verify_dummy(password)
        logger.info("Login rejected")
        raise InvalidCredentialsError("Invalid credentials")

    if not verify_password(password, user.password_hash):
        logger.info("Login rejected")
        raise InvalidCredentialsError("Invalid credentials")

    if needs_rehash(user.password_hash):
        user.password_hash = hash_password(password)
        user = await user_repo.save(user)
        logger.info("Upgraded password hash for user %s", user.id)

    return user


async def login_user(
    *,
    credentials: LoginCredentials,
    verifier: AuthStrategy[LoginCredentials],
) -> LoginResult:
    """Authenticate through ``verifier`` and return a fresh access token."""
    user = await verifier.authenticate(credentials)
    issued = create_access_token(user)
    logger.info("Issued token for user %s", user.id)
    return LoginResult(user=user, token=issued.token, expires_at=issued.expires_at)


def apply_update(user: User, update: UserUpdate) -> None:
    """Copy the supplied fields of ``update`` onto ``user``.

    A new password is hashed fresh; the stored hash is never carried over.
    """
    if update.is_set("username"):
        user.username = update.username
    if update.is_set("password"):
        user.password_hash = hash_password(update.password)
    if update.is_set("email"):
        user.email = update.email
    if update.is_set("birthday"):
        user.birthday = update.birthday
    user.touch()


async def update_user(
    *,
    user_id: UUID,
    update: UserUpdate,
    user_repo: IUserRepository,
) -> User:
    user = await user_repo.get_by_id(user_id, refresh=True)
    if user is None:
        raise NotFoundError("User not found")

    if update.is_set("username") and update.username != user.username:
        if await user_repo.get_by_username(str(update.username)):
            raise UserAlreadyExistsError("User already exists")

    if update.is_empty:
        return user

    apply_update(user, update)
    return await user_repo.save(user)


async def deregister_user(*, user_id: UUID, user_repo: IUserRepository) -> None:
    """Delete the account. Favorites are references and go with it."""
    if not await user_repo.delete_by_id(user_id):
        raise NotFoundError("User not found")
    logger.info("Deregistered user %s", user_id)
