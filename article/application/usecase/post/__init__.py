"""Post use cases."""

from .common import AuthorResponse, PostPageResponse, PostResponse, TagResponse
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_admin_posts import ListAdminPostsRequest, ListAdminPostsUseCase
from .list_my_posts import ListMyPostsRequest, ListMyPostsUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "AuthorResponse",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListAdminPostsRequest",
    "ListAdminPostsUseCase",
    "ListMyPostsRequest",
    "ListMyPostsUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PostPageResponse",
    "PostResponse",
    "TagResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
