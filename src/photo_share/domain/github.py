"""Domain models for the GitHub identity provider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GithubProfile:
    """Profile data returned by a successful code exchange."""

    login: str
    name: str | None
    avatar_url: str
    access_token: str


@dataclass(frozen=True)
class ProviderError:
    """In-band failure reported by GitHub."""

    message: str
