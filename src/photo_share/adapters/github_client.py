"""GitHub OAuth client adapter."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from photo_share.domain.github import GithubProfile, ProviderError

DEFAULT_OAUTH_URL = "https://github.com/login/oauth/access_token"
DEFAULT_API_URL = "https://api.github.com"


class GithubClient(Protocol):
    """Interface for the GitHub code exchange."""

    async def exchange_code(
        self, code: str, client_id: str, client_secret: str
    ) -> GithubProfile | ProviderError:
        """Exchange an authorization code for a token and the user's profile."""


@dataclass
class HttpxGithubClient(GithubClient):
    """GitHub client implemented with httpx."""

    http_client: httpx.AsyncClient
    oauth_url: str = DEFAULT_OAUTH_URL
    api_url: str = DEFAULT_API_URL

    @classmethod
    def create(
        cls, oauth_url: str = DEFAULT_OAUTH_URL, api_url: str = DEFAULT_API_URL
    ) -> "HttpxGithubClient":
        """Create a GitHub client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(),
            oauth_url=oauth_url,
            api_url=api_url.rstrip("/"),
        )

    async def exchange_code(
        self, code: str, client_id: str, client_secret: str
    ) -> GithubProfile | ProviderError:
        """Request an access token, then fetch the authenticated user.

        GitHub reports a bad code with a 200 response and an error body, so
        failures come back as ProviderError rather than exceptions.
        """
        response = await self.http_client.post(
            self.oauth_url,
            headers={"Accept": "application/json"},
            json={
                "client_id": client_id,
                "client_secret": client_secret,
                "code": code,
            },
            timeout=10,
        )
        response.raise_for_status()
        token_payload = response.json()
        access_token = token_payload.get("access_token")
        if not access_token:
            return ProviderError(message=_token_error_message(token_payload))

        user_response = await self.http_client.get(
            f"{self.api_url}/user",
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {access_token}",
            },
            timeout=10,
        )
        if user_response.is_error:
            message = _response_message(user_response)
            if message:
                return ProviderError(message=message)
            user_response.raise_for_status()
        user_payload = user_response.json()
        return GithubProfile(
            login=user_payload["login"],
            name=user_payload.get("name"),
            avatar_url=user_payload.get("avatar_url") or "",
            access_token=access_token,
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _token_error_message(payload: dict[str, object]) -> str:
    for key in ("error_description", "error", "message"):
        value = payload.get(key)
        if value:
            return str(value)
    return "GitHub did not return an access token"


def _response_message(response: httpx.Response) -> str | None:
    """Return the `message` field of a JSON error body, if any."""
    if "json" not in response.headers.get("content-type", ""):
        return None
    payload = response.json()
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return None
