"""Domain models for the photo sharing API."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class PhotoCategory(str, Enum):
    """Fixed set of photo categories."""

    PORTRAIT = "PORTRAIT"
    LANDSCAPE = "LANDSCAPE"
    ACTION = "ACTION"
    SELFIE = "SELFIE"


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    github_login: str
    name: str
    avatar: str
    github_token: str


@dataclass(frozen=True)
class PhotoRecord:
    """Represents a posted photo stored in the database."""

    id: UUID
    name: str
    description: str | None
    category: PhotoCategory
    user_id: str


@dataclass(frozen=True)
class NewPhoto:
    """Photo attributes supplied by the poster."""

    name: str
    description: str | None = None
    category: PhotoCategory = PhotoCategory.PORTRAIT


@dataclass(frozen=True)
class AuthResult:
    """Session token and persisted user returned by a login."""

    token: str
    user: UserRecord
