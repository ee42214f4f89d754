"""Concrete SQLAlchemy repository implementations for the identity context."""
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from myflix.application.errors import UserAlreadyExistsError
from myflix.domain.identity.entities import User
from myflix.domain.identity.value_objects import Email, PasswordHash, Username
from myflix.infrastructure.database.models.identity import UserFavoriteModel, UserModel
from myflix.infrastructure.database.repositories.errors import translate_db_errors

_USERNAME_CONSTRAINT = "users_username_key"


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @translate_db_errors
    async def get_by_id(self, user_id: UUID, *, refresh: bool = False) -> User | None:
        # refresh=True bypasses the identity map and reads the committed row
        result = await self._session.get(UserModel, user_id, populate_existing=refresh)
        return _to_user(result) if result else None

    @translate_db_errors
    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return _to_user(row) if row else None

    @translate_db_errors
    async def save(self, user: User) -> User:
        existing = await self._session.get(UserModel, user.id)
        if existing:
            existing.username = str(user.username)
            existing.email = str(user.email)
            existing.password_hash = str(user.password_hash)
            existing.birthday = user.birthday
            existing.updated_at = datetime.now(timezone.utc)
            _sync_favorites(existing, user.favorites)
        else:
            model = UserModel(
                id=user.id,
                username=str(user.username),
                email=str(user.email),
                password_hash=str(user.password_hash),
                birthday=user.birthday,
                created_at=user.created_at,
                updated_at=user.updated_at,
                favorites=[UserFavoriteModel(user_id=user.id, movie_id=m) for m in user.favorites],
            )
            self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # lost a race with a concurrent register or rename
            if _USERNAME_CONSTRAINT in str(exc.orig):
                raise UserAlreadyExistsError("User already exists") from exc
            raise
        return user

    @translate_db_errors
    async def delete_by_id(self, user_id: UUID) -> bool:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0


def _sync_favorites(model: UserModel, wanted: set[UUID]) -> None:
    current = {f.movie_id for f in model.favorites}
    model.favorites = [f for f in model.favorites if f.movie_id in wanted]
    for movie_id in wanted - current:
        model.favorites.append(UserFavoriteModel(user_id=model.id, movie_id=movie_id))


# ── Mappers ───────────────────────────────────────────────────────────────────

def _to_user(m: UserModel) -> User:
    return User(
        id=m.id,
        username=Username(m.username),
        email=Email(m.email),
        password_hash=PasswordHash(m.password_hash),
        birthday=m.birthday,
        favorites={f.movie_id for f in m.favorites},
        created_at=m.created_at,
        updated_at=m.updated_at,
    )
