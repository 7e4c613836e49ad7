"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from photo_share.adapters.github_client import GithubClient
from photo_share.config import Settings
from photo_share.containers import AppContainer
from photo_share.domain.github import GithubProfile, ProviderError
from photo_share.domain.models import NewPhoto, PhotoRecord, UserRecord
from photo_share.services.auth import GithubAuthService
from photo_share.services.photos import PhotoRepository, PhotoService
from photo_share.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)

    def count(self) -> int:
        return len(self.users)

    def list_all(self) -> list[UserRecord]:
        return list(self.users.values())

    def get_by_login(self, github_login: str) -> UserRecord | None:
        return self.users.get(github_login)

    def get_by_token(self, github_token: str) -> UserRecord | None:
        for user in self.users.values():
            if user.github_token == github_token:
                return user
        return None

    def upsert(self, user: UserRecord) -> UserRecord:
        self.users[user.github_login] = user
        return user


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """In-memory photo repository for tests."""

    photos: list[PhotoRecord] = field(default_factory=list)

    def count(self) -> int:
        return len(self.photos)

    def list_all(self) -> list[PhotoRecord]:
        return list(self.photos)

    def get(self, photo_id: str) -> PhotoRecord | None:
        for photo in self.photos:
            if str(photo.id) == photo_id:
                return photo
        return None

    def list_by_user(self, github_login: str) -> list[PhotoRecord]:
        return [photo for photo in self.photos if photo.user_id == github_login]

    def create_photo(self, photo: NewPhoto, user_id: str) -> PhotoRecord:
        record = PhotoRecord(
            id=uuid4(),
            name=photo.name,
            description=photo.description,
            category=photo.category,
            user_id=user_id,
        )
        self.photos.append(record)
        return record


@dataclass
class FakeGithubClient(GithubClient):
    """Fake GitHub client keyed by authorization code."""

    profiles: dict[str, GithubProfile | ProviderError] = field(
        default_factory=lambda: {
            "validcode": GithubProfile(
                login="ada",
                name="Ada",
                avatar_url="a.png",
                access_token="tok1",
            ),
            "badcode": ProviderError(message="bad verification code"),
        }
    )
    calls: list[tuple[str, str, str]] = field(default_factory=list)

    async def exchange_code(
        self, code: str, client_id: str, client_secret: str
    ) -> GithubProfile | ProviderError:
        self.calls.append((code, client_id, client_secret))
        return self.profiles.get(code, ProviderError(message="unknown code"))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        github_client_id="client-id",
        github_client_secret="client-secret",
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        environment="test",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture
def github_client() -> FakeGithubClient:
    return FakeGithubClient()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    photo_repository: InMemoryPhotoRepository,
    github_client: FakeGithubClient,
) -> AppContainer:
    auth_service = GithubAuthService(
        client=github_client,
        repository=user_repository,
        client_id=settings.github_client_id,
        client_secret=settings.github_client_secret,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        github_client=github_client,
        user_service=UserService(user_repository),
        photo_service=PhotoService(photo_repository),
        auth_service=auth_service,
        close_resources=close_resources,
    )
