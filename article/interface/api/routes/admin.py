"""Administrative routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from article.application.usecase.post import (
    ListAdminPostsRequest,
    ListAdminPostsUseCase,
    PostResponse,
)
from article.domain.value import PostStatus
from article.interface.api.auth import CurrentCaller
from article.interface.api.routes.posts import page_response
from article.interface.api.schemas import PageResponse

router = APIRouter(prefix="/api/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/posts", response_model=PageResponse[PostResponse])
async def list_all_posts(
    caller: CurrentCaller,
    list_admin_posts_use_case: FromDishka[ListAdminPostsUseCase],
    limit: int | None = Query(default=None),
    offset: int = Query(default=0),
    post_status: PostStatus | None = Query(default=None, alias="status"),
) -> PageResponse[PostResponse]:
    """List every post, trashed and soft-deleted ones included.

    Any authenticated caller may use it; there are no roles.
    """
    page = await list_admin_posts_use_case.execute(
        ListAdminPostsRequest(status=post_status, limit=limit, offset=offset)
    )
    return page_response("All posts retrieved successfully", page)
