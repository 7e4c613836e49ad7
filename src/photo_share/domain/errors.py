"""Errors surfaced to GraphQL clients."""


class AuthError(Exception):
    """GitHub rejected the authorization code."""


class AuthorizationError(Exception):
    """The operation requires an authenticated user."""


class NotFoundError(LookupError):
    """A non-nullable lookup found nothing."""


class StoreError(RuntimeError):
    """The store acknowledged a write without returning the row."""
