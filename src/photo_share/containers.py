"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from photo_share.adapters.github_client import GithubClient, HttpxGithubClient
from photo_share.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_share.adapters.supabase_user_repository import SupabaseUserRepository
from photo_share.config import Settings
from photo_share.services.auth import GithubAuthService
from photo_share.services.photos import PhotoService
from photo_share.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    github_client: GithubClient
    user_service: UserService
    photo_service: PhotoService
    auth_service: GithubAuthService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    photo_repository = SupabasePhotoRepository(supabase_client)
    github_client = HttpxGithubClient.create(
        oauth_url=resolved_settings.github_oauth_url,
        api_url=resolved_settings.github_api_url,
    )
    auth_service = GithubAuthService(
        client=github_client,
        repository=user_repository,
        client_id=resolved_settings.github_client_id,
        client_secret=resolved_settings.github_client_secret,
    )

    async def close_resources() -> None:
        await github_client.close()

    return AppContainer(
        settings=resolved_settings,
        github_client=github_client,
        user_service=UserService(user_repository),
        photo_service=PhotoService(photo_repository),
        auth_service=auth_service,
        close_resources=close_resources,
    )
