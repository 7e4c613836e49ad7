"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from photo_share.domain.errors import NotFoundError
from photo_share.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def count(self) -> int:
        """Return the number of stored users."""

    def list_all(self) -> list[UserRecord]:
        """Return every user in store order."""

    def get_by_login(self, github_login: str) -> UserRecord | None:
        """Return the user for a GitHub login, if present."""

    def get_by_token(self, github_token: str) -> UserRecord | None:
        """Return the user holding a session token, if present."""

    def upsert(self, user: UserRecord) -> UserRecord:
        """Insert or fully replace the user keyed by login and return it."""


@dataclass
class UserService:
    """Application service for reading users."""

    repository: UserRepository

    def total_users(self) -> int:
        return self.repository.count()

    def all_users(self) -> list[UserRecord]:
        return self.repository.list_all()

    def get_user(self, github_login: str) -> UserRecord | None:
        """Return the user for a login or None."""
        return self.repository.get_by_login(github_login)

    def require_user(self, github_login: str) -> UserRecord:
        """Return the user for a login or raise NotFoundError."""
        user = self.repository.get_by_login(github_login)
        if user is None:
            raise NotFoundError(f"user {github_login} not found")
        return user

    def get_by_token(self, github_token: str | None) -> UserRecord | None:
        """Resolve a session token to its user."""
        if not github_token:
            return None
        return self.repository.get_by_token(github_token)
