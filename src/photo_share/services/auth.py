"""GitHub login flow: code exchange followed by a user upsert."""

import logging
from dataclasses import dataclass

from photo_share.adapters.github_client import GithubClient
from photo_share.domain.errors import AuthError
from photo_share.domain.github import GithubProfile, ProviderError
from photo_share.domain.models import AuthResult, UserRecord
from photo_share.services.users import UserRepository

_logger = logging.getLogger(__name__)


@dataclass
class GithubAuthService:
    """Turns a GitHub authorization code into a persisted user and token."""

    client: GithubClient
    repository: UserRepository
    client_id: str
    client_secret: str

    async def authenticate(self, code: str) -> AuthResult:
        """Exchange the code and upsert the user record.

        The provider's error message is raised unchanged as AuthError. On
        success the user row is replaced in a single store call, so fields
        from a previous login never survive.
        """
        result = await self.client.exchange_code(
            code, client_id=self.client_id, client_secret=self.client_secret
        )
        if isinstance(result, ProviderError):
            _logger.warning("GitHub rejected authorization code: %s", result.message)
            raise AuthError(result.message)

        user = self.repository.upsert(_user_from_profile(result))
        _logger.info("GitHub login succeeded: login=%s", user.github_login)
        return AuthResult(token=user.github_token, user=user)


def _user_from_profile(profile: GithubProfile) -> UserRecord:
    """Map GitHub profile fields onto a user record."""
    return UserRecord(
        github_login=profile.login,
        name=profile.name or profile.login,
        avatar=profile.avatar_url,
        github_token=profile.access_token,
    )
