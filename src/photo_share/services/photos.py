"""Photo queries and the photo posting flow."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_share.domain.errors import AuthorizationError, NotFoundError
from photo_share.domain.models import NewPhoto, PhotoRecord, UserRecord

PHOTO_URL_PREFIX = "/img/photos"

_logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photos."""

    def count(self) -> int:
        """Return the number of stored photos."""

    def list_all(self) -> list[PhotoRecord]:
        """Return every photo in store order."""

    def get(self, photo_id: str) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def list_by_user(self, github_login: str) -> list[PhotoRecord]:
        """Return the photos posted by a user."""

    def create_photo(self, photo: NewPhoto, user_id: str) -> PhotoRecord:
        """Insert a photo and return it with the store-assigned id."""


@dataclass
class PhotoService:
    """Application service for photos."""

    repository: PhotoRepository

    def total_photos(self) -> int:
        return self.repository.count()

    def all_photos(self) -> list[PhotoRecord]:
        return self.repository.list_all()

    def get_photo(self, photo_id: str) -> PhotoRecord:
        """Return a photo or raise NotFoundError."""
        photo = self.repository.get(photo_id)
        if photo is None:
            raise NotFoundError(f"photo {photo_id} not found")
        return photo

    def photos_posted_by(self, github_login: str) -> list[PhotoRecord]:
        return self.repository.list_by_user(github_login)

    def post_photo(
        self, current_user: UserRecord | None, photo: NewPhoto
    ) -> PhotoRecord:
        """Store a new photo owned by the current user."""
        if current_user is None:
            _logger.warning("Rejected photo post without an authenticated user")
            raise AuthorizationError("only an authorized user can post a photo")
        created = self.repository.create_photo(
            photo, user_id=current_user.github_login
        )
        _logger.info("Photo posted: id=%s user=%s", created.id, created.user_id)
        return created


def photo_url(photo_id: UUID | str) -> str:
    """Return the public image path for a photo id."""
    return f"{PHOTO_URL_PREFIX}/{photo_id}.jpg"
