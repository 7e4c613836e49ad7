"""Supabase-backed photo repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_share.domain.errors import StoreError
from photo_share.domain.models import NewPhoto, PhotoCategory, PhotoRecord
from photo_share.services.photos import PhotoRepository

_PHOTO_COLUMNS = "id, name, description, category, user_id"


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo persistence."""

    client: Client

    def count(self) -> int:
        """Return the number of photo rows."""
        response = self.client.table("photos").select("id", count="exact").execute()
        return response.count or 0

    def list_all(self) -> list[PhotoRecord]:
        """Return every photo row."""
        response = self.client.table("photos").select(_PHOTO_COLUMNS).execute()
        return [_to_photo(row) for row in response.data or []]

    def get(self, photo_id: str) -> PhotoRecord | None:
        """Return a photo by id; malformed ids match nothing."""
        try:
            parsed = UUID(photo_id)
        except ValueError:
            return None
        response = (
            self.client.table("photos")
            .select(_PHOTO_COLUMNS)
            .eq("id", str(parsed))
            .limit(1)
            .execute()
        )
        if response.data:
            return _to_photo(response.data[0])
        return None

    def list_by_user(self, github_login: str) -> list[PhotoRecord]:
        """Return the photos posted by a user."""
        response = (
            self.client.table("photos")
            .select(_PHOTO_COLUMNS)
            .eq("user_id", github_login)
            .execute()
        )
        return [_to_photo(row) for row in response.data or []]

    def create_photo(self, photo: NewPhoto, user_id: str) -> PhotoRecord:
        """Create a photo row and return it with its generated id."""
        response = (
            self.client.table("photos")
            .insert(
                {
                    "name": photo.name,
                    "description": photo.description,
                    "category": photo.category.value,
                    "user_id": user_id,
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to create photo in Supabase")
        return _to_photo(response.data[0])


def _to_photo(row: dict[str, object]) -> PhotoRecord:
    description = row.get("description")
    return PhotoRecord(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        description=str(description) if description is not None else None,
        category=PhotoCategory(row["category"]),
        user_id=str(row["user_id"]),
    )
