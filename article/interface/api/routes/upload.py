"""Image upload route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, UploadFile

from article.application.usecase.upload import (
    UploadImageRequest,
    UploadImageResponse,
    UploadImageUseCase,
)
from article.domain.error import ValidationError
from article.interface.api.auth import CurrentCaller
from article.interface.api.schemas import DataResponse

router = APIRouter(prefix="/api", tags=["upload"], route_class=DishkaRoute)


@router.post("/upload", response_model=DataResponse[UploadImageResponse])
async def upload_image(
    caller: CurrentCaller,
    upload_image_use_case: FromDishka[UploadImageUseCase],
    image: UploadFile | None = File(default=None),
) -> DataResponse[UploadImageResponse]:
    """Upload an image (multipart field ``image``) and return its URL."""
    if image is None:
        raise ValidationError("image file is required", detail="missing field: image")

    content = await image.read()
    result = await upload_image_use_case.execute(
        UploadImageRequest(
            filename=image.filename,
            content=content,
            content_type=image.content_type,
            user_id=str(caller.id),
        )
    )
    return DataResponse(message="Image uploaded successfully", data=result)
