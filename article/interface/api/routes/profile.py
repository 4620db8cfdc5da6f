"""Profile route."""

from fastapi import APIRouter
from pydantic import BaseModel

from article.interface.api.auth import CurrentCaller
from article.interface.api.schemas import DataResponse

router = APIRouter(prefix="/api", tags=["profile"])


class ProfileResponse(BaseModel):
    """Identity carried by the caller's session token."""

    id: str
    email: str
    full_name: str


@router.get("/profile", response_model=DataResponse[ProfileResponse])
async def get_profile(caller: CurrentCaller) -> DataResponse[ProfileResponse]:
    """Return the caller's identity from the token, without a storage lookup."""
    return DataResponse(
        message="Profile retrieved successfully",
        data=ProfileResponse(
            id=str(caller.id), email=caller.email, full_name=caller.full_name
        ),
    )
