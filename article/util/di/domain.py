"""Domain layer DI providers."""

from dishka import Scope, provide

from article.config import AuthSettings, PaginationSettings
from article.domain.repository import (
    PostRepository,
    TagRepository,
    TransactionManager,
    UserRepository,
)
from article.domain.service import (
    CredentialService,
    JWTService,
    MediaService,
    MediaUploader,
    PostService,
    TagService,
)
from article.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to share the request's repositories
    and transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_credential_service(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        transactions: TransactionManager,
        auth_settings: AuthSettings,
    ) -> CredentialService:
        """Provide credential domain service."""
        return CredentialService(
            user_repository=user_repository,
            jwt_service=jwt_service,
            transactions=transactions,
            auth_settings=auth_settings,
        )

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, transactions: TransactionManager
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository, transactions=transactions)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        transactions: TransactionManager,
        pagination: PaginationSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            tag_service=tag_service,
            transactions=transactions,
            pagination=pagination,
        )

    @provide
    def get_media_service(self, uploader: MediaUploader) -> MediaService:
        """Provide media domain service."""
        return MediaService(uploader=uploader)
