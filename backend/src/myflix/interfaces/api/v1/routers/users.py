"""Users router: registration, profile update, deregistration, favorites."""
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from myflix.application.errors import AlreadyFavoriteError, NotFoundError, UserAlreadyExistsError
from myflix.interfaces.api.v1.schemas.identity import (
    RegisterRequest,
    UserResponse,
    UserUpdateRequest,
)
from myflix.interfaces.dependencies import CurrentUser, Facade, require_self

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, facade: Facade):
    try:
        user = await facade.register(
            username=body.username,
            password=body.password,
            email=str(body.email),
            birthday=body.birthday,
        )
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    return UserResponse.from_user(user)


@router.put("/{username}", response_model=UserResponse)
async def update_user(
    username: str, body: UserUpdateRequest, facade: Facade, current_user: CurrentUser
):
    require_self(username, current_user)
    try:
        user = await facade.update_user(current_user.id, body.to_domain())
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except UserAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    return UserResponse.from_user(user)


@router.delete("/{username}")
async def deregister(username: str, facade: Facade, current_user: CurrentUser):
    require_self(username, current_user)
    try:
        await facade.deregister(current_user.id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return {"detail": "User deregistered."}


@router.post("/{username}/movies/{movie_id}", response_model=UserResponse)
async def add_favorite(
    username: str, movie_id: UUID, facade: Facade, current_user: CurrentUser
):
    require_self(username, current_user)
    try:
        user = await facade.add_favorite(current_user.id, movie_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except AlreadyFavoriteError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return UserResponse.from_user(user)


@router.delete("/{username}/movies/{movie_id}", response_model=UserResponse)
async def remove_favorite(
    username: str, movie_id: UUID, facade: Facade, current_user: CurrentUser
):
    require_self(username, current_user)
    try:
        user = await facade.remove_favorite(current_user.id, movie_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.from_user(user)
