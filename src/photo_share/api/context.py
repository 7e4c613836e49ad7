"""Per-request GraphQL context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import Request
from strawberry.fastapi import BaseContext

if TYPE_CHECKING:
    from starlette.background import BackgroundTasks
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from photo_share.containers import AppContainer
    from photo_share.domain.models import UserRecord
    from photo_share.services.auth import GithubAuthService
    from photo_share.services.photos import PhotoService
    from photo_share.services.users import UserService


@dataclass
class GraphQLContext(BaseContext):
    """Services and resolved identity for a single GraphQL operation."""

    user_service: UserService
    photo_service: PhotoService
    auth_service: GithubAuthService
    current_user: UserRecord | None = None

    # Filled in by Strawberry's FastAPI integration.
    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def get_context(request: Request) -> GraphQLContext:
    """Build a fresh context, resolving the bearer token to a user."""
    container: AppContainer = request.app.state.container
    token = bearer_token(request.headers.get("Authorization"))
    return GraphQLContext(
        user_service=container.user_service,
        photo_service=container.photo_service,
        auth_service=container.auth_service,
        current_user=container.user_service.get_by_token(token),
    )
