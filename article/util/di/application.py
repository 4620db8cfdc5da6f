"""Application layer DI providers."""

from dishka import Scope, provide

from article.application.usecase.auth import LoginUseCase, RegisterUseCase
from article.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListAdminPostsUseCase,
    ListMyPostsUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from article.application.usecase.upload import UploadImageUseCase
from article.domain.service import CredentialService, MediaService, PostService
from article.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Use case provider (REQUEST scope)."""

    scope = Scope.REQUEST

    @provide
    def get_register_use_case(
        self, credential_service: CredentialService
    ) -> RegisterUseCase:
        return RegisterUseCase(credential_service=credential_service)

    @provide
    def get_login_use_case(self, credential_service: CredentialService) -> LoginUseCase:
        return LoginUseCase(credential_service=credential_service)

    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_list_my_posts_use_case(
        self, post_service: PostService
    ) -> ListMyPostsUseCase:
        return ListMyPostsUseCase(post_service=post_service)

    @provide
    def get_list_admin_posts_use_case(
        self, post_service: PostService
    ) -> ListAdminPostsUseCase:
        return ListAdminPostsUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_upload_image_use_case(
        self, media_service: MediaService
    ) -> UploadImageUseCase:
        return UploadImageUseCase(media_service=media_service)
