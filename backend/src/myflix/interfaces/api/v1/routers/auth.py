"""Auth router: login."""
from fastapi import APIRouter, HTTPException, status

from myflix.application.errors import InvalidCredentialsError
from myflix.interfaces.api.v1.schemas.identity import LoginRequest, LoginResponse, UserResponse
from myflix.interfaces.dependencies import Facade

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, facade: Facade):
    try:
        result = await facade.login(username=body.username, password=body.password)
    except InvalidCredentialsError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    return LoginResponse(user=UserResponse.from_user(result.user), token=result.token)
