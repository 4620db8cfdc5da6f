"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel

from article.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListMyPostsRequest,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostPageResponse,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from article.domain.value import PostStatus
from article.interface.api.auth import CurrentCaller
from article.interface.api.schemas import (
    DataResponse,
    MessageResponse,
    PageMeta,
    PageResponse,
)

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(BaseModel):
    """Body for creating or replacing a post.

    Field rules are checked by the domain and reported as validation errors.
    """

    title: str
    content: str
    category: str
    status: str
    featured_image_url: str | None = None
    tags: list[str] = []


def page_response(message: str, page: PostPageResponse) -> PageResponse[PostResponse]:
    return PageResponse(
        message=message,
        data=page.posts,
        meta=PageMeta(total=page.total, limit=page.limit, offset=page.offset),
    )


@router.get("", response_model=PageResponse[PostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int | None = Query(default=None),
    offset: int = Query(default=0),
    post_status: PostStatus | None = Query(default=None, alias="status"),
) -> PageResponse[PostResponse]:
    """List posts, newest first, optionally filtered by status."""
    page = await list_posts_use_case.execute(
        ListPostsRequest(status=post_status, limit=limit, offset=offset)
    )
    return page_response("Posts retrieved successfully", page)


# Declared before /{post_id} so "my" is not parsed as an ID
@router.get("/my", response_model=PageResponse[PostResponse])
async def list_my_posts(
    caller: CurrentCaller,
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    limit: int | None = Query(default=None),
    offset: int = Query(default=0),
) -> PageResponse[PostResponse]:
    """List the caller's own posts in every status."""
    page = await list_my_posts_use_case.execute(
        ListMyPostsRequest(user_id=str(caller.id), limit=limit, offset=offset)
    )
    return page_response("Your posts retrieved successfully", page)


@router.get("/{post_id}", response_model=DataResponse[PostResponse])
async def get_post(
    post_id: UUID, get_post_use_case: FromDishka[GetPostUseCase]
) -> DataResponse[PostResponse]:
    """Fetch one post with its author and tags."""
    post = await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))
    return DataResponse(message="Post retrieved successfully", data=post)


@router.post(
    "",
    response_model=DataResponse[PostResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: PostAPIRequest,
    caller: CurrentCaller,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> DataResponse[PostResponse]:
    """Create a post authored by the caller."""
    post = await create_post_use_case.execute(
        CreatePostRequest(author_id=str(caller.id), **request.model_dump())
    )
    return DataResponse(message="Post created successfully", data=post)


@router.put("/{post_id}", response_model=DataResponse[PostResponse])
async def update_post(
    post_id: UUID,
    request: PostAPIRequest,
    caller: CurrentCaller,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> DataResponse[PostResponse]:
    """Replace a post's fields and tags. Only the author may do this."""
    post = await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=str(post_id), user_id=str(caller.id), **request.model_dump()
        )
    )
    return DataResponse(message="Post updated successfully", data=post)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: UUID,
    caller: CurrentCaller,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> MessageResponse:
    """Soft-delete a post. Only the author may do this."""
    await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=str(caller.id))
    )
    return MessageResponse(message="Post deleted successfully")
