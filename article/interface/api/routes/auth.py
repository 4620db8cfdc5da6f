"""Registration and login routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from article.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from article.interface.api.schemas import DataResponse

router = APIRouter(prefix="/api", tags=["authentication"], route_class=DishkaRoute)


@router.post(
    "/register",
    response_model=DataResponse[RegisterResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest, register_use_case: FromDishka[RegisterUseCase]
) -> DataResponse[RegisterResponse]:
    """Create a user account.

    Returns the new user's public fields; the password is never echoed.
    """
    user = await register_use_case.execute(request)
    return DataResponse(message="User registered successfully", data=user)


@router.post("/login", response_model=DataResponse[LoginResponse])
async def login(
    request: LoginRequest, login_use_case: FromDishka[LoginUseCase]
) -> DataResponse[LoginResponse]:
    """Exchange email and password for a session token."""
    result = await login_use_case.execute(request)
    return DataResponse(message="Login successful", data=result)
