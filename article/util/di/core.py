"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from article.config import AuthSettings, MediaSettings, PaginationSettings, Settings
from article.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider.

    Settings are read once per container from environment variables and
    the .env file; nested sections are exposed individually.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_media_settings(self, settings: Settings) -> MediaSettings:
        return settings.media

    @provide
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination
