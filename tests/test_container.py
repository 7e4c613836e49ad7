"""Tests for container wiring."""

import asyncio

from photo_share.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.photo_service is not None
    assert container.auth_service.client_id == "client-id"
    asyncio.run(container.close_resources())
