"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from campus.config import AuthSettings, CommentSettings, Settings, ToggleSettings
from campus.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_toggle_settings(self, settings: Settings) -> ToggleSettings:
        return settings.toggles
