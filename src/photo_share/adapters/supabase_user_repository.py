"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from photo_share.domain.errors import StoreError
from photo_share.domain.models import UserRecord
from photo_share.services.users import UserRepository

_USER_COLUMNS = "github_login, name, avatar, github_token"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def count(self) -> int:
        """Return the number of user rows."""
        response = (
            self.client.table("users").select("github_login", count="exact").execute()
        )
        return response.count or 0

    def list_all(self) -> list[UserRecord]:
        """Return every user row."""
        response = self.client.table("users").select(_USER_COLUMNS).execute()
        return [_to_user(row) for row in response.data or []]

    def get_by_login(self, github_login: str) -> UserRecord | None:
        """Return the user for a GitHub login, if present."""
        return self._get_one("github_login", github_login)

    def get_by_token(self, github_token: str) -> UserRecord | None:
        """Return the user holding a session token, if present."""
        return self._get_one("github_token", github_token)

    def upsert(self, user: UserRecord) -> UserRecord:
        """Insert or replace the user row keyed by login in one request."""
        response = (
            self.client.table("users")
            .upsert(
                {
                    "github_login": user.github_login,
                    "name": user.name,
                    "avatar": user.avatar,
                    "github_token": user.github_token,
                },
                on_conflict="github_login",
            )
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to upsert user in Supabase")
        return _to_user(response.data[0])

    def _get_one(self, column: str, value: str) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if response.data:
            return _to_user(response.data[0])
        return None


def _to_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        github_login=str(row["github_login"]),
        name=str(row["name"]),
        avatar=str(row["avatar"]),
        github_token=str(row["github_token"]),
    )
